# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="triemap",
    version="1.0.0",
    description="Depth-parameterized trie-map with inherited lookups, hierarchical visiting and JSON rendering",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["triemap", "triemap.*"]),  # Subpackages without __init__.py
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'triemap-demo=triemap.interface.cli.app:main',  # Runs the demonstrations
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
