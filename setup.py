from setuptools import setup, find_namespace_packages

setup(
    name='atmfjstc-variant-codegen',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=find_namespace_packages(where='src', include=['atmfjstc.lib.variant_codegen*']),

    install_requires=[
        'termcolor>=2, <4',
        'colorama>=0.4.6, <1',
    ],

    extras_require={
        'test': [
            'pytest>=7',
        ],
    },

    entry_points={
        'console_scripts': [
            'variant-codegen=atmfjstc.lib.variant_codegen.cli.main:main',
        ],
    },

    zip_safe=True,

    description="Generates Python enum definitions (sizes, iterators, keys, labels, draw heights) from variant lists",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Topic :: Software Development :: Code Generators",
        "Typing :: Typed",
    ],
    python_requires='>=3.11',
)
