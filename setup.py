import setuptools

setuptools.setup(
    name = 'smoothpath',
    version = '1.0',
    description = 'smooth Bezier splines through sequences of points',
    packages = setuptools.find_packages(exclude=['tests']),
    python_requires = '>=3.6',
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['smoothpath = smoothpath.__main__:main']},
)
