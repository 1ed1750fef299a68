"""
Setup configuration for sway-nav.

Directional focus changes for sway that skip over tabbed and stacked siblings.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read long description from README if it exists
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="sway-nav",
    version="1.0.0",
    description="Focus navigation for Sway that skips tabbed and stacked siblings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="NixOS Configuration Team",
    packages=find_packages(include=["sway_nav", "sway_nav.*"]),
    install_requires=[
        "i3ipc>=2.2",
        "click",
        "rich",
        "pydantic>=2.0",
    ],
    python_requires=">=3.11",
    entry_points={
        "console_scripts": [
            "sway-nav=sway_nav.__main__:cli",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
