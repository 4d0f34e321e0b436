from setuptools import setup, find_packages

setup(
    name="unionfind-lab", 
    version="0.1.0",
    description="Disjoint set union with rank, size and naive merge strategies",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.7",
    install_requires=[
        "numpy",
        "pandas",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "unionfind-lab=unionfind_lab.run_experiment:main",
        ],
    },
)
