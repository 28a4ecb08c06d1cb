from setuptools import setup, find_packages

setup(
    name="tinylog",
    version="0.1.0a0",
    description="Process-wide logging with named channels, per-channel sinks and THAC0 verbosity",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "colorama>=0.4.6",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: System :: Logging",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)
