#!/usr/bin/env python3
import os
import re

from setuptools import setup, find_packages


def main():
    os.chdir(os.path.dirname(os.path.realpath(__file__)))

    with open('termtable/__init__.py', 'r') as file:
        version = re.search(r"^__version__\s*=\s*'(.*)'", file.read(), re.M).group(1)

    with open('README', 'rb') as f:
        long_descr = f.read().decode('utf-8')

    setup(
        name='termtable',
        version=version,
        packages=find_packages(exclude=['tests']),
        python_requires='>=3.7',
        install_requires=[
            'toml',
            'appdirs',
            'wcwidth',
            'colorama>=0.4.6',
        ],
        extras_require={
            'testing': [
                'pytest',
            ],
        },
        entry_points={
            'console_scripts': [
                'termtable = termtable.cli:main',
            ],
        },
        long_description=long_descr,
        url='https://github.com/fknorr/termtable',
        license='MIT',
        author='Fabian Knorr',
        author_email='git@fabian-knorr.info',
        description='Print aligned, bordered and styled tables to the terminal',
    )


if __name__ == "__main__":
    main()
