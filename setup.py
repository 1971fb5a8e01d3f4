from setuptools import setup, find_packages

setup(
    name="disc-caddie",
    version="0.1.0",
    description="Disc golf throw recommendation and flight path engine",
    author="Disc Caddie",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.26.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    entry_points={
        "console_scripts": [
            "disc-caddie=disccaddie.main:main",
        ],
    },
)
