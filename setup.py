from setuptools import setup, find_packages

setup(
    name='fzyscore',
    version='0.1.0',
    packages=find_packages(include=['fzyscore', 'fzyscore.*']),
    python_requires='>=3.9',
    entry_points={
        'console_scripts': [
            'fzyscore=fzyscore.cli.CommandLineInterface:main',
        ],
    },
    install_requires=[
        'python-dotenv>=1.0.0',
        'click>=8.1',
        'rich',
        'pydantic>=2.5',
        'pyyaml',
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
