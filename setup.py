#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt', 'tabulate']
test_requires = ['pytest']

setup(
    name='xduce',
    version='0.1.0',
    author='Andrew Thomson',
    author_email='athomsonguy@gmail.com',
    packages=['xduce'],
    install_requires = requires,
    tests_require = test_requires,
    extras_require = {
      'test': test_requires,
    },
    entry_points = {
      'console_scripts': [
        'xduce-bench = xduce.bench:main',
        ],
    },
    license='MIT',
    description='composable single pass transformations over sequences (transducers).',
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
)
