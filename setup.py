#!/usr/bin/env python3
"""Setup script for ddlkit."""

from setuptools import setup, find_packages
import os

# Read the README file
here = os.path.abspath(os.path.dirname(__file__))
try:
    with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = 'ddlkit - dialect-aware DDL generation for Python'

setup(
    name='ddlkit',
    version='0.1.0',
    description='ddlkit - dialect-aware DDL generation for Python',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='ddlkit Team',
    author_email='ddlkit@example.com',
    packages=find_packages(include=['ddlkit', 'ddlkit.*']),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2.0.0',
        'python-dotenv>=1.0.0',
        'orjson>=3.8.0',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-mock>=3.11.0',
            'black>=23.0.0',
            'isort>=5.12.0',
            'mypy>=1.4.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'ddlkit=ddlkit.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Database',
        'Topic :: Software Development :: Code Generators',
    ],
    keywords='ddl sql schema postgresql mysql sqlite',
)
