"""Setup script for the Duplicate Scan Tool."""

import os

from setuptools import setup, find_packages

setup(
    name="duplicate-scan-tool",
    version="1.0.0",
    description="Concurrent duplicate file finder using SHA-1 content digests",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Dupe Tool Team",
    packages=find_packages(exclude=["dupe_tool.tests", "dupe_tool.tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dupe-tool=dupe_tool.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: System :: Filesystems",
        "Topic :: Utilities",
    ],
)
