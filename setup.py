from setuptools import setup, find_packages

setup(
    name="cluster-aggregator",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"aggregator": ["config/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "Pillow",
        "scikit-image",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cluster-aggregator=aggregator.main:main",
        ],
    },
)
