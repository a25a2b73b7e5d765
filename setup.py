#!/usr/bin/env python
"""
Setup.py distribution file for wcswidth-tables.
"""
# std imports
import os
import codecs

# 3rd party
import setuptools


def _get_here(fname):
    return os.path.join(os.path.dirname(__file__), fname)


def _get_version(fname, key='package'):
    import json
    with open(fname, 'r') as fin:
        return json.load(fin)[key]


def main():
    """Setup.py entry point."""
    setuptools.setup(
        name='wcswidth-tables',
        version=_get_version(
            _get_here(os.path.join('wcswidth_tables', 'version.json'))),
        description=(
            "Generates wide and zero width lookup tables from the Unicode Character Database"),
        long_description=codecs.open(
            _get_here('README.rst'), 'rb', 'utf8').read(),
        python_requires='>=3.11',
        install_requires=[
            'jinja2',
            'requests',
            'python-dateutil',
        ],
        extras_require={
            'test': ['pytest'],
        },
        license='MIT',
        packages=['wcswidth_tables'],
        package_data={
            'wcswidth_tables': ['*.json', 'code_templates/*.j2'],
            '': ['*.rst'],
        },
        entry_points={
            'console_scripts': [
                'wcswidth-tables = wcswidth_tables.cli:main',
            ],
        },
        zip_safe=True,
        classifiers=[
            'Intended Audience :: Developers',
            'Natural Language :: English',
            'Environment :: Console',
            'License :: OSI Approved :: MIT License',
            'Operating System :: POSIX',
            'Programming Language :: Python :: 3.11',
            'Programming Language :: Python :: 3.12',
            'Topic :: Software Development :: Code Generators',
            'Topic :: Software Development :: Internationalization',
            'Topic :: Terminals'
        ],
        keywords=[
            'cjk',
            'combining',
            'eastasian',
            'unicode',
            'wcswidth',
            'wcwidth',
        ],
    )


if __name__ == '__main__':
    main()
