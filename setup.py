#!/usr/bin/env python3
import os
from setuptools import setup, find_packages

# read version without importing package and its dependencies
about = {}
with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'sigmaclip', 'version.py')) as f:
    exec(f.read(), about)
VERSION = about['VERSION']

setup(
    name='sigmaclip',
    version=VERSION,
    description='sigmaclip iterative sigma clipping package',
    packages=find_packages(include=['sigmaclip', 'sigmaclip.*']),
    entry_points={
        'console_scripts': [
            'sigmaclip=sigmaclip.cli.sigmaclip:main',
        ]
    },
    include_package_data=True,
    python_requires='>=3.7',
    install_requires=[
        'scipy',
        'numpy',
        'astropy',
        'pandas',
        'pyyaml'
    ],
    extras_require={
        'test': ['pytest']
    }
)
