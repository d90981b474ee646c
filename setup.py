#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import find_packages, setup

# There are problems running setup.py on Windows if the encoding is not set
with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()


setup(
    name='envkit',
    version='0.3.0',
    description="Environment variable list helpers and executable discovery on PATH.",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=find_packages(include=['envkit', 'envkit.*']),
    entry_points={
        'console_scripts': [
            'envkit=envkit.cli:app'
        ]
    },
    include_package_data=True,
    install_requires=[
        'click>=8.0',
        'rich',
        'typer>=0.9',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires=">=3.10",
    license="MIT license",
    zip_safe=False,
    keywords='environment PATH PATHEXT executable which',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ]
)
