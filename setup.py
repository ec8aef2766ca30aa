#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

try:
    with open('README.md') as f:
        readme = f.read()
except IOError:
    readme = ''


# version
here = os.path.dirname(os.path.abspath(__file__))
init_path = os.path.join(here, 'wasmtx', '__init__.py')
version = next((line.split('=')[1].strip().replace("'", '')
                for line in open(init_path)
                if line.startswith('__version__ = ')),
               '0.0.dev0')

# requirements
with open(os.path.join(here, 'requirements.txt')) as fp:
    install_requires = fp.read().splitlines()

setup(
    name="wasmtx",
    version=version,
    description='Build wasm contract transaction messages from the console.',
    long_description=readme,
    packages=find_packages(include=['wasmtx', 'wasmtx.*']),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['wasmcli=wasmtx.user.command:main'],
    },
    include_package_data=True,
    license="MIT Licence",
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
    ],
)
