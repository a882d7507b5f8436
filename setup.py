# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='dotwriter',
  version='0.1.0',
  description='Sequential writer for Graphviz DOT files.',
  python_requires='>=3.10',

  packages=['dotwriter', 'dotwriter.bin'],
  py_modules=['utest'],
  entry_points={'console_scripts': ['dot-edges=dotwriter.bin.dot_edges:main']},
)
