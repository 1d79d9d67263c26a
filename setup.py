#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup, find_packages


deps = {
    'sharding': [
        "eth-typing>=2.0.0,<6.0.0",
        "eth-utils>=1.2.0,<6.0.0",
    ],
    'test': [
        "pytest>=3.6.1",
    ],
    'lint': [
        "mypy>=0.620",
        "flake8>=3.5.0",
    ],
}


deps['dev'] = (
    deps['sharding'] +
    deps['test'] +
    deps['lint']
)

install_requires = deps['sharding']

setup(
    name='sharding-bitfield',
    version='0.0.1-alpha.1',
    description='Immutable attester bitfields for sharding votes',
    packages=find_packages(
        exclude=[
            "tests",
            "tests.*",
        ]
    ),
    python_requires='>=3.6',
    extras_require=deps,
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    install_requires=install_requires,
)
