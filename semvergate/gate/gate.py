"""
The compatibility gate.

One run per module:

1. Resolve the baseline (highest published version) through the repository.
2. Ask the analyzer how the new artifact differs from the baseline artifact.
3. Classify the bump the developer declared (baseline -> declared version).
4. Compute the next version from the baseline and the classification.
5. Apply the policy, then write the next-version marker files.

Errors are returned, not raised: ``check`` yields a ``returns`` Result whose
failure side is a GateError tagged FATAL or RECOVERABLE. Nothing is retried.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from returns.result import Failure, Result, Success

from semvergate.config import GateConfiguration
from semvergate.core.interfaces import ArtifactRepository, CompatibilityAnalyzer
from semvergate.exceptions import GateError, GateViolation, PreconditionError
from semvergate.model import BuildModule
from semvergate.versioning import (
    Classification,
    Version,
    classify_bump,
    next_version,
)

from .output import OutputAggregator
from .policy import Verdict, decide_verdict
from .resolver import VersionResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GateOutcome:
    """Result of one gate run."""

    classification: Classification
    declared_bump: Classification
    baseline: Version
    next_version: Version
    verdict: Verdict


GateResult = Result[Optional[GateOutcome], GateError]


class CompatibilityGate:
    def __init__(
        self,
        repository: ArtifactRepository,
        analyzer: CompatibilityAnalyzer,
        config: GateConfiguration,
        aggregator: Optional[OutputAggregator] = None,
    ):
        self.repository = repository
        self.analyzer = analyzer
        self.config = config
        self.resolver = VersionResolver(repository, config.ignore_snapshots)
        self.aggregator = aggregator or OutputAggregator()

    def check(self, module: BuildModule) -> GateResult:
        """
        Run the gate for one module.

        Returns:
            Success(GateOutcome) when the gate ran and passed (OK or WARNED),
            Success(None) when there was nothing to check (skipped, aggregator
            packaging), Failure(GateError) otherwise.
        """
        if self.config.skip:
            logger.info("Skipping semantic versioning check, as skip is set to true")
            return Success(None)

        if not module.is_deployable:
            logger.info(
                f"No semantic versioning information for {module.packaging} packaging"
            )
            return Success(None)

        artifact_file = module.artifact_file
        logger.debug(f"Using as original input file: {artifact_file}")
        if not artifact_file.is_file():
            return Failure(
                PreconditionError.for_policy(
                    f"Unable to read file {artifact_file}", self.config.halt_on_failure
                )
            )

        try:
            outcome = self.evaluate(module, artifact_file)
        except GateError as e:
            return Failure(e)

        if outcome.verdict is Verdict.FAILED:
            return Failure(GateViolation(outcome.classification, outcome.declared_bump))
        if outcome.verdict is Verdict.WARNED:
            logger.warning(
                f"Version {module.version} is a {outcome.declared_bump} bump, "
                f"but only a {outcome.classification} bump is required"
            )

        try:
            self.write_output(module, outcome.next_version)
        except GateError as e:
            return Failure(e)

        return Success(outcome)

    def evaluate(self, module: BuildModule, artifact_file: Path) -> GateOutcome:
        """
        Classify the module against its baseline and decide the verdict.

        Raises:
            ResolutionError: If the repository cannot list or fetch versions
            AnalysisError: If the analyzer fails
        """
        if self.config.exclude_packages:
            logger.debug(
                f"Excluded packages are {', '.join(self.config.exclude_packages)}"
            )

        coordinate = module.coordinate
        declared = module.declared_version
        classification = Classification.NONE

        baseline = self.resolver.resolve_baseline(coordinate)
        if baseline is None:
            logger.info(f"No other versions available for {coordinate.key}")
            baseline = declared
        else:
            baseline_file = self.repository.fetch(coordinate, str(baseline))
            if baseline_file is None or not Path(baseline_file).exists():
                logger.warning(f"Artifact {baseline} has no attached file")
                baseline = declared
            else:
                logger.info(f"Checking SemVer against last known version {baseline}")
                logger.debug(
                    f"Runtime classpath elements are {', '.join(module.classpath)}"
                )
                classification = self.analyzer.classify(
                    Path(baseline_file),
                    artifact_file,
                    self.config.exclude_packages,
                    self.config.exclude_files,
                    module.classpath,
                )

        declared_bump = classify_bump(baseline, declared)
        computed = next_version(baseline, classification)
        logger.info(
            f"Determined SemVer type as {classification} and is currently "
            f"{declared_bump}, next version should be: {computed}"
        )

        return GateOutcome(
            classification=classification,
            declared_bump=declared_bump,
            baseline=baseline,
            next_version=computed,
            verdict=decide_verdict(classification, declared_bump, self.config),
        )

    def write_output(self, module: BuildModule, version: Version) -> None:
        """
        Write the module's marker file and merge it into the parent's.

        Raises:
            OutputWriteError: If a marker file cannot be written
        """
        if not self.config.writes_output:
            return

        filename = self.config.output_file_name
        overwrite = self.config.overwrite_output_file
        self.aggregator.write_module_output(
            module.build_dir, filename, str(version), overwrite
        )
        if module.parent_build_dir is not None:
            merged = self.aggregator.merge_with_parent(
                str(version), module.parent_build_dir, filename, overwrite
            )
            if merged is not None:
                logger.debug(f"Parent next version is now {merged}")
