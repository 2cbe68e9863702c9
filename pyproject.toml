[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dhcpwire"
version = "0.1.0"
description = "DHCPv6 option encoding, IANA registries, RFC 1035 labels, IPv6 UDP sockets and zero-touch provisioning helpers"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["dhcp", "dhcpv6", "iana", "rfc1035", "ztp", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dhcpwire"]

[tool.pytest.ini_options]
addopts = "-ra"
