"""
Setup script for the treetiles package.
"""

from setuptools import find_packages, setup

setup(
    name='treetiles',
    version='1.0.0',
    description='Squarified treemap layout for weighted items',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'treetiles = treetiles.__main__:main',
        ],
    },
)
