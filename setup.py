# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="A minimal Lisp interpreter: reader, lexical evaluator and printer",
    packages=find_packages(include=["lispy", "lispy.*"]),
    python_requires=">=3.11",
    install_requires=[
        "loguru>=0.7",
        "typer>=0.12",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "hypothesis>=6",
        ],
    },
    entry_points={
        "console_scripts": [
            "lispy=lispy.cli:app",
        ],
    },
    zip_safe=False,
)
