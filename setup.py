import setuptools

with open('README.md', 'rt') as f:
    long_description = f.read()

setuptools.setup(
    name='numintervals',
    version='0.0.0',
    description='intervals used as numbers, with three-valued predicates and an indeterminacy exception policy',
    long_description=long_description,
    license='MIT',
    python_requires='>=3.8',
    install_requires=['gmpy2>=2.1.2'],
    extras_require={
        'test': ['pytest'],
    },
    packages=setuptools.find_packages(include=['numintervals', 'numintervals.*']),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Operating System :: POSIX :: Linux',
        'License :: OSI Approved :: MIT License',
    ],
)
