from setuptools import setup, find_packages
import cfgdom


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='cfgdom',
    description="Dominators, immediate dominators and dominance frontiers "
                "of control flow graphs in pure Python",
    long_description=long_description,
    version=cfgdom.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test", "test.*"]),
    python_requires='>=3.6',
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
            'hypothesis-networkx',
            'networkx',
        ],
    },
    entry_points={
        'console_scripts': [
            'cfgdom-analyze = cfgdom.cli.analyze:analyze',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Compilers',
    ]
)
