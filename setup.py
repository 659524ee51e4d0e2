from setuptools import setup, find_packages

setup(
    name='canonreq',
    version='0.1.0',
    description='Canonical immutable HTTP request for request signing',
    author='guyskk',
    author_email='guyskk@qq.com',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.8',
    ],
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2.0',
        'toml>=0.10',
        'click>=7.0',
        'coloredlogs>=10.0',
        'werkzeug>=2.0',
    ],
    extras_require={
        'dev': [
            'invoke>=1.0.0',
            'pytest>=6.0',
            'pytest-cov>=2.5.1',
            'twine>=1.11.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'canonreq=canonreq.cli:cli',
        ],
    },
)
