[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mimecraft"
version = "0.1.0"
description = "MIME building blocks: Base64 and quoted-printable codecs, codec chains, header field values and a mail-tool option parser"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mime",
    "email",
    "base64",
    "quoted-printable",
    "codec",
    "content-type",
    "content-disposition",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mimecraft-b64 = "mimecraft.tools:b64_main"
mimecraft-qp = "mimecraft.tools:qp_main"

[tool.hatch.build.targets.wheel]
packages = ["mimecraft"]

[tool.pytest.ini_options]
addopts = "-ra"
