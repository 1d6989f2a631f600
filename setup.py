#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup script for Zeka.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="zeka",
    version="0.1.0",
    description="Create Zettelkasten notes, references and sketches and follow the links between them",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        "python-dotenv>=0.19.0",
        "pyyaml>=6.0",
    ],
    entry_points={
        "console_scripts": [
            "zeka=zeka.main:main",
        ],
    },
)
