#!/usr/bin/env python3
# encoding: utf-8
"""
setup.py

Packaging of the prefixsid BGP Prefix-SID attribute decoder.
"""

import importlib
import os
import sys
import setuptools

sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src/prefixsid'))
prefixsid_version = importlib.import_module('version')


def filesOf(directory):
    files = []
    for l, d, fs in os.walk(directory):
        if not d:
            for f in fs:
                files.append(os.path.join(l, f))
    return files


data_files = [
    ('etc/prefixsid/examples', filesOf('etc/prefixsid')),
]

setuptools.setup(
    name='prefixsid',
    version=prefixsid_version.version,
    description='BGP Prefix-SID attribute (RFC 8669, RFC 9252 SRv6 services) decoder',
    long_description=open('README.md').read() if os.path.exists('README.md') else '',
    long_description_content_type='text/markdown',
    license='BSD-3-Clause',
    python_requires='>=3.10',
    package_dir={'': 'src'},
    packages=setuptools.find_packages('src'),
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
    entry_points={
        'console_scripts': [
            'prefixsid = prefixsid.application.main:main',
        ],
    },
    data_files=data_files,
    classifiers=[
        'Programming Language :: Python :: 3',
        'Topic :: Internet',
        'Topic :: System :: Networking',
    ],
)
