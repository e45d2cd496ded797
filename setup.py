from setuptools import setup, find_packages

setup(
    name="igc-flightlog",
    version="1.0.0",
    description="IGC Flight Log - Extracts flight metrics from IGC flight recorder files into a CSV flight log or KML tracks",
    author="IGC Flight Log contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "simplekml",  # For KML output
    ],
    extras_require={
        "test": [
            "pytest",
            "aerofiles",  # For writing IGC fixtures
            "python-dateutil",  # Imported by aerofiles but not declared by it
        ],
    },
    entry_points={
        'console_scripts': [
            'igc-flightlog=main:run',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: GIS",
        "Environment :: Console",
        "Operating System :: OS Independent",
    ],
)
