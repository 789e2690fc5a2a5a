#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pandoc-quotes - Setup Configuration
Installs the quotemarks engine, its configuration package and the
pandoc-quotes filter command.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_path.exists():
    requirements = [
        line.strip()
        for line in requirements_path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="pandoc-quotes",
    version="0.2.0",
    description="Pandoc filter that replaces quotation nodes with language-appropriate quotation marks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="pandoc-quotes contributors",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(include=["config", "config.*", "quotemarks", "quotemarks.*"]),
    py_modules=["pandoc_quotes"],
    install_requires=requirements,
    extras_require={
        # Test dependencies
        "test": [
            "pytest>=7.4.0",
        ],

        # Development dependencies
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pandoc-quotes=pandoc_quotes:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Topic :: Text Processing :: Markup",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="pandoc filter quotation marks typography i18n",
)
