"""
puzsolve: shortest puzzle solutions by breadth-first search
"""

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="puzsolve",
    version="0.1.0",
    description="Breadth-first search puzzle solver with clock, strings, chess and hoppers puzzles",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"puzsolve": ["data/*/*.txt"]},
    install_requires=[
        "numpy>=1.24",
        "tabulate>=0.9.0",
        "termcolor>=1.1.0",
        "tqdm>=4.67.1",
        "click>=8.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "puzsolve=puzsolve.cli:cli",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    python_requires=">=3.9",
)
