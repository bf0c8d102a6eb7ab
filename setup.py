# -*- coding: utf-8 -*-
"""
setup.py - CAD file organizer install script
"""

from setuptools import setup, find_packages
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8") if (this_directory / "README.md").exists() else ""

setup(
    name="cad-file-organizer",
    version="1.0.0",
    description="Sort dental CAD downloads into EXOCAD, STL, PACKAGES and OTHER folders",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",

    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Topic :: Utilities",
        "Topic :: System :: Filesystems",
    ],

    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,

    python_requires=">=3.8",

    install_requires=[
        "python-dotenv>=0.21.0",    # .env support for logging options
    ],

    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "isort>=5.10.0",
            "pyinstaller>=5.0",         # build.py
        ],
    },

    entry_points={
        "console_scripts": [
            "cad-organizer=cad_organizer.cli:main",
        ],
    },

    keywords="file organization exocad stl dental cad",

    zip_safe=False,
)
