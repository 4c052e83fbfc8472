import setuptools

setuptools.setup(
    name = 'splinegen',
    version = '0.2',
    description = 'generic interpolation and extrapolation curves',
    packages = setuptools.find_packages(exclude=['test', 'test.*']),
    python_requires = '>=3.7',
    install_requires=['numpy', 'scipy'],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
