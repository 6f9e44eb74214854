from setuptools import setup, find_packages

setup(
    name='cgfunge',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    package_data={'cgfunge': ['programs/*.cgf']},
    install_requires=['pyarrow'],  # execution trace tables / CSV export
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'cgfunge=cgfunge.cli:entry_point'
        ]
    },
    author='CGFunge Team',
    description='An interpreter for CGFunge, a two-dimensional stack-based esoteric language',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='LGPLv3.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    python_requires='>=3.8',
)
