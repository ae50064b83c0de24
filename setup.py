"""
Setup script for the propmerge package.
"""

from setuptools import setup, find_packages

setup(
    name="propmerge",
    version="1.0.0",
    description="Layered .properties configuration merging with runtime overrides",
    author="propmerge Team",
    packages=find_packages(include=["propmerge", "propmerge.*"]),
    python_requires=">=3.9",
    install_requires=[
        # Settings files and runtime variables
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
