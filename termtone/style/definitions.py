# style/definitions.py

ESC = '\033'
CSI = f'{ESC}['

# SGR format utility
FMT = lambda x: f'{CSI}{x}m'

RESET_SEQ = '0'
RESET = FMT(RESET_SEQ)

# Attribute flags and their SGR codes, in the order they are emitted
ATTRIBUTES = {
    'bold': '1',
    'faint': '2',
    'italic': '3',
    'underline': '4',
    'blink': '5',
    'reverse': '7',
    'overline': '53',
    'crossout': '9',
}
