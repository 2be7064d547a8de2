#! /usr/bin/env python
# -*- coding:utf-8 -*-

from setuptools import setup, find_packages

setup(
    name='polypuzzle',
    version='0.2',
    description='Fit two polygons edge to edge along their longest shared boundary',
    license='MIT',
    packages=find_packages(exclude=['examples', 'examples.*']),
    package_data={'polypuzzle': ['tests/data/*']},
    classifiers=['Development Status :: 4 - Beta',
                 'Programming Language :: Python',
                 'Programming Language :: Python :: 3'],
    entry_points={
        'console_scripts': ['polypuzzle=polypuzzle.cli:main'],
    },
    install_requires=['svgwrite', 'simplejson', 'matplotlib'],
    extras_require={
        'test': ['pytest', 'pyclipper'],
    },
    python_requires='>=3.6',
)
