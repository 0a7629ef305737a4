from glob import glob
from setuptools import setup


setup(
    name='guac',
    use_scm_version={
        'fallback_version': '0.3.0',
    },
    description='Algebraic RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['guac'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
            'mypy',
            'bandit',
            'safety',
        ],
    },
    tests_require=[
        'pytest',
        'pytest-cov',
        'coverage',
        'flake8',
        'mypy',
        'bandit',
        'safety',
    ],
    scripts=glob('bin/*'),
    license='ISC',
)
