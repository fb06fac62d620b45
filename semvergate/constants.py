APP_NAME = "semvergate"

DEFAULT_OUTPUT_FILE_NAME = "nextVersion.txt"
DEFAULT_MODULE_DESCRIPTOR = "semvergate.yaml"
DEFAULT_BUILD_DIR = "target"
DEFAULT_PACKAGING = "jar"
DEFAULT_REPOSITORY_ROOT = "~/.m2/repository"

# Aggregator modules have no artifact of their own to compare.
NON_DEPLOYABLE_PACKAGINGS = frozenset({"pom"})

PACKAGING_EXTENSIONS = {
    "jar": "jar",
    "bundle": "jar",
    "maven-plugin": "jar",
    "ejb": "jar",
    "war": "war",
    "ear": "ear",
    "rar": "rar",
    "zip": "zip",
}

PARENT_LOCK_TIMEOUT = 30.0
