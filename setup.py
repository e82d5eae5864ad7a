from setuptools import find_packages, setup

setup(
    name="news-playground",
    version="0.1.0",
    author="Teron",
    author_email="teron131@gmail.com",
    description="News article AI playground: a six-step LLM pipeline streamed over server-sent events.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/teron131/news-playground",
    packages=find_packages(
        exclude=[
            "*.tests",
            "*.tests.*",
            "tests.*",
            "tests",
            "*.__pycache__",
            "__pycache__",
        ]
    ),
    install_requires=[
        # Core Dependencies
        "pydantic>=2",
        "python-dotenv",

        # LangChain Framework
        "langchain",
        "langchain-core",
        "langchain-google-genai",
        "langchain-openai",

        # Serving
        "fastapi",
        "uvicorn",
        "gradio",

        # Utilities
        "httpx",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
