from glob import glob
from setuptools import setup


setup(
    name='rpnexpr',
    use_scm_version={
        'fallback_version': '0.1.0',
    },
    description='RPN expression parser and evaluator',
    install_requires=[
        'regex',
    ],
    packages=['rpnexpr'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.7',
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
