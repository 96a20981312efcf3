from setuptools import setup, find_packages

setup(
    name="quadwarp",
    version="1.0.0",
    description="Four-handle perspective transform engine for canvas editors",
    author="NovaVista",
    packages=find_packages(include=["quadwarp", "quadwarp.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "opencv-python>=4.8.0",
            "scipy>=1.10.0",
        ],
    },
    python_requires=">=3.9",
)
