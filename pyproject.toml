[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nutkit"
version = "0.1.0"
description = "Key hashing, server distribution, a chained hash table and event polling for caching proxies"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hashing",
    "ketama",
    "consistent-hashing",
    "memcached",
    "redis",
    "proxy",
    "crc",
    "fnv",
    "murmur",
    "jenkins",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Proxy Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nutkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
