"""
Compatibility analyzer that delegates to an external command.

The command is called as::

    <command> --old OLD --new NEW [--exclude-package P]... [--exclude-file F]... [--classpath CP]

and must print the classification (none, patch, minor or major) as the last
non-empty line of its standard output.
"""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Sequence, Union

from semvergate.exceptions import AnalysisError
from semvergate.versioning import Classification, UnknownClassificationError

logger = logging.getLogger(__name__)


class CommandAnalyzer:
    def __init__(self, command: Union[str, Sequence[str]]):
        if isinstance(command, str):
            self.command: List[str] = shlex.split(command)
        else:
            self.command = list(command)

    def build_arguments(
        self,
        old_file: Path,
        new_file: Path,
        exclude_packages: Sequence[str],
        exclude_files: Sequence[str],
        classpath: Sequence[str],
    ) -> List[str]:
        args = self.command + ["--old", str(old_file), "--new", str(new_file)]
        for package in exclude_packages:
            args += ["--exclude-package", package]
        for prefix in exclude_files:
            args += ["--exclude-file", prefix]
        if classpath:
            args += ["--classpath", os.pathsep.join(classpath)]
        return args

    def classify(
        self,
        old_file: Path,
        new_file: Path,
        exclude_packages: Sequence[str],
        exclude_files: Sequence[str],
        classpath: Sequence[str],
    ) -> Classification:
        if not self.command:
            raise AnalysisError(
                "No analyzer command configured. "
                "Use --analyzer or set [analyzer] command in the config file."
            )

        args = self.build_arguments(
            old_file, new_file, exclude_packages, exclude_files, classpath
        )
        logger.debug(f"Running analyzer: {shlex.join(args)}")

        try:
            ret = subprocess.run(args, text=True, capture_output=True, check=False)
        except OSError as e:
            raise AnalysisError(f"Unable to run analyzer {self.command[0]}: {e}") from e

        if ret.returncode != 0:
            raise AnalysisError(
                f"Analyzer exited with status {ret.returncode}: {ret.stderr.strip()}"
            )

        lines = [line.strip() for line in ret.stdout.splitlines() if line.strip()]
        if not lines:
            raise AnalysisError("Analyzer printed no classification")

        try:
            return Classification.parse(lines[-1])
        except UnknownClassificationError as e:
            raise AnalysisError(str(e)) from e
