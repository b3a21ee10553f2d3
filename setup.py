from setuptools import setup, find_packages

setup(
    name="deskscan",
    version="1.0.0",
    description="deskscan - XDG desktop entry scanner and launcher",
    license="GPLv3",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "PyQt6>=6.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-qt>=4.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "deskscan=deskscan.main:main",
        ],
    },
)
