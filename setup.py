#!/usr/bin/env python

from setuptools import setup

setup(  name = "symmetryCadGen",
        version = '0.1',
        description = 'Space Group Operator Export For OpenSCAD Symmetry Libraries.',
        author = 'Logan Case',
        packages = ['symmetryCadGen',
                    'symmetryCadGen.structure',
                    'symmetryCadGen.filemanagers',
                    'symmetryCadGen.util',
                   ],
        install_requires = ['numpy', 'sympy', 'gemmi'],
        extras_require = {'test': ['pytest']},
        entry_points = {'console_scripts':
                        ['symmetrycad-export=symmetryCadGen.__main__:main']},
        python_requires = '>=3.8',
     )
