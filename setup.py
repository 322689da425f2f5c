from setuptools import setup

version = {}
with open('gbuncert/version.py', 'r') as f:
    exec(f.read(), version)

with open('README.md', 'r') as f:
    long_description = f.read()

setup(
    name='gbuncert',
    version=version['__version__'],
    description='Type A / Type B measurement uncertainty calculator (GB/T 27411-2012)',
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.19',
        'matplotlib>=3.3',
        'scipy>=1.5',
        'sympy>=1.7',
        'markdown>=3.3',
        'pyyaml>=5.4',
        ],
    extras_require={'test': 'pytest'},
    packages=['gbuncert', 'gbuncert.common', 'gbuncert.common.style', 'gbuncert.report'],
    entry_points={
        'console_scripts': ['gbuncert = gbuncert.__main__:main_calc',
                            'gbuncertf = gbuncert.__main__:main_setup',
                            'gbuncerti = gbuncert.__main__:main_interactive',
                            ],
        },
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Operating System :: OS Independent',
        ]
    )
