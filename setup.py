#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pygaseos',
    include_package_data=True,
    version='1.0.0',
    packages=find_packages(),
    description='pyGasEOS - AGA8 DETAIL and GERG-2008 natural gas equations of state',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Mark W. Burgoyne',
    author_email='mark.w.burgoyne@gmail.com',
    keywords=['aga8', 'gerg-2008', 'natural gas', 'equation of state'],
    classifiers=[],
    install_requires=[
        'numpy',
        'pandas',
        'tabulate',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
