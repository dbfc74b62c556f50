from setuptools import setup, find_packages
import pathlib


here = pathlib.Path(__file__).parent
try:
    long_description = (here / "README.md").read_text(encoding="utf-8")
except Exception:
    long_description = "FenwickSums: binary indexed trees for point updates and range sums."

setup(
    name="fenwicksums",
    version="0.1.0",
    description="Fenwick tree (binary indexed tree) for point updates and range sums of integers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="",
    packages=find_packages(exclude=("docs", "experiments", "tests")),
    python_requires='>=3.10',
    install_requires=[
        "numpy",
        "pandas",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
