# setup.py
from setuptools import setup, find_packages

setup(
    name="tinylisp",
    version="0.1.0",
    description="Evaluator core of a minimal Lisp with explicit environment threading",
    packages=find_packages(include=["tinylisp", "tinylisp.*", "tinylisp_lsp", "tinylisp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
        "rich>=13",
    ],
    extras_require={
        "lsp": [
            "pygls>=1.1,<2",
            "lsprotocol>=2023.0.0",
        ],
        "test": [
            "pytest>=7",
            "hypothesis>=6",
        ],
    },
    entry_points={
        "console_scripts": [
            "tinylisp=tinylisp.cli:main",
            "tinylisp-ls=tinylisp_lsp.server:main",
        ],
    },
    zip_safe=False,
)
