[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ugc-scraper"
version = "0.5.0"
description = "Scraper for the UGC league website, with a small JSON API server"
requires-python = ">=3.10"
keywords = ["ugc", "tf2", "team fortress 2", "scraper", "league", "esports"]
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
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]
dependencies = [
    "beautifulsoup4>=4.12",
    "httpx>=0.27",
    "starlette>=0.37",
    "uvicorn>=0.29",
]

[project.optional-dependencies]
test = [
    "pytest>=8.0",
    "httpx>=0.27",
]

[project.scripts]
ugc-api-server = "ugc_scraper.server:main"

[tool.hatch.build.targets.wheel]
packages = ["ugc_scraper"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
