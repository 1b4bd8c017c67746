from setuptools import setup, find_packages

setup(
    name="turing-algebra",
    version="0.1.0",
    description="Composable deterministic Turing machines: transition tables, a stepping engine and a composition algebra",
    author="Anonymous",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.8",
    install_requires=[
        "torch>=2.0.0",
        "tqdm>=4.65.0",
        "typing-extensions>=4.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "turing-algebra=turing_algebra.cli.main:main",
        ],
    },
)
