from setuptools import setup, find_packages

setup(
    name="sydoku-engine",
    version="1.0.0",
    description="Sudoku Puzzle Engine: unique-solution generator, daily challenges, moves and hints",
    packages=find_packages(include=["sydoku", "sydoku.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sydoku=sydoku.cli:main",
        ],
    },
)
