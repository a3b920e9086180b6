from setuptools import setup

setup(
    name='rolling-median',
    version='0.1.0',
    description='Running median of a numeric stream using two heaps',
    packages=['rolling_median'],
    python_requires='>=3.8',
    install_requires=['numpy'],
    extras_require={
        'test': ['pytest'],
    },
)
