from setuptools import setup, find_packages
import asymptote

setup(
    name='asymptote',
    version=asymptote.__version__,
    description='Light-weight harness estimating the asymptotic complexity of algorithms',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        'click', 'termcolor', 'ruamel.yaml', 'tabulate', 'matplotlib', 'numpy', 'pandas',
        'progressbar2',
    ],
    extras_require={
        'test': ['pytest'],
    },

    entry_points='''
        [console_scripts]
        asymptote=asymptote.cli:launch_cli
    ''',
)
