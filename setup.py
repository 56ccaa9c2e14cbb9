# setup.py - Package charwise
from setuptools import setup, find_packages

setup(
    name="charwise",
    version="0.1.0",
    description="Unicode-correct character and word utilities: indexing, slicing, segmentation, occurrence counting",
    packages=find_packages(include=["charwise", "charwise.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
