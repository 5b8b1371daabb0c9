from setuptools import setup, find_packages

setup(
    name="termtone",
    version="0.1.0",
    description="Terminal color profile detection, color degradation and styled text",
    packages=find_packages(include=["termtone", "termtone.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
