#!/usr/bin/env python3

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="release-contributors",
    version="0.1.0",
    author="Release Contributors Team",
    description="Generate contributor credits for releases from git history and GitHub profiles",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.2.0",
        "requests>=2.28.0",
    ],
    extras_require={
        "tests": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "release-contributors=release_contributors.cli.main:main",
        ],
    },
)
