"""Setup script for Golf Matchup Edge."""

from setuptools import setup

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="golf-matchup-edge",
    version="1.0.0",
    author="Eric",
    description="Golf matchup odds reconciliation and model edge calculator",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["golf_matchup_edge"],
    package_dir={"golf_matchup_edge": "."},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Games/Entertainment",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0.0",
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0", "black>=23.0.0"],
    },
    entry_points={
        "console_scripts": [
            "golf-edge=golf_matchup_edge.cli:main",
        ],
    },
)
