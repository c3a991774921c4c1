# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="unpacked-size",
    version="0.1.0",
    description="Report the unpacked size of the files a package would publish",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["unpackedsize*"]),
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'unpacked-size=unpackedsize.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
