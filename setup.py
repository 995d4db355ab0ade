# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="tagcloud",
    version="0.1.0",
    description="Generate an HTML tag cloud of the most frequent words in a text file",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["tagcloud*"]),
    package_data={
        "tagcloud": ["interface/locales/*.json"],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'tagcloud=tagcloud.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
