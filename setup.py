from setuptools import setup, find_packages

setup(
    name='wdsession',
    version='0.1.0',
    license="Apache 2.0",
    description="Session establishment and protocol negotiation for WebDriver clients",
    long_description=open('README.md').read(),  # Ensure the README.md exists and is correct
    long_description_content_type='text/markdown',  # Use 'text/markdown' for Markdown files
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={
        "wdsession": ["configs/*.yaml"],
    },
    install_requires=[
        "requests>=2.28",
        "pydantic>=2.0",
        "click>=8.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'wdsession-start=wdsession.command.wdsession_start:run',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.9',
)
