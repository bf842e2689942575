import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="heard",
    version="0.1.0",
    description="Command-line tool for jotting down short categorized notes.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},
    entry_points={
        'console_scripts': [
            'heard = heard.cli:main'
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        'rich>=10.0',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-mock',
            'pyfakefs',
        ],
    },
    python_requires='>=3.8',
)
