# setup.py
from setuptools import setup, find_packages

setup(
    name="raykit",
    version="0.1.0",
    description="RayKit: points, vectors, colors and a PPM canvas for a ray tracer",
    packages=find_packages(include=["raykit", "raykit.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
