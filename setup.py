from setuptools import setup, find_packages

setup(
    name="username-directory",
    version="1.0.0",
    description="Concurrent in-memory username registration directory with suggestions and attempt analytics",
    author="Username Directory Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "boto3>=1.34.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "moto[ssm]>=5.0.0",
        ],
    },
    python_requires=">=3.12",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.12",
    ],
)
