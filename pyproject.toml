[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abyssal_watcher"
version = "0.1.0"
description = "Multi-layer threat detection of payloads with encrypted audit logging"
requires-python = ">=3.10"
keywords = ["security", "threat-detection", "monitoring", "anomaly", "audit-log"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
abyssal-watcher-scan = "abyssal_watcher.scanner:main"

[tool.hatch.build.targets.wheel]
packages = ["abyssal_watcher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
