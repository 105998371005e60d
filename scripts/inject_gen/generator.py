"""
Main generator module

Loads binding descriptions, renders one injector per target and writes the
results under the output root.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Optional

from . import loader
from .codegen import package_path
from .errors import InjectGenError
from .injector import InjectorModel

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration for a generator run"""
    output_root: str = 'gen'
    jobs: int = 1          # Worker threads used for rendering; 1 renders serially
    dry_run: bool = False  # Render without writing files


@dataclass
class TargetResult:
    """Outcome of generating one target"""
    name: str
    source: Optional[str] = None
    path: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class GenerationReport:
    """Results of a run: load failures first, then rendered targets in input order"""
    results: list[TargetResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[TargetResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[TargetResult]:
        return [r for r in self.results if not r.ok]


def output_path(output_root: str, model: InjectorModel) -> str:
    """Path of the generated source file for a model"""
    return os.path.join(output_root, package_path(model.package), f'{model.class_name}.java')


def render_model(model: InjectorModel) -> TargetResult:
    """Render a single model, capturing failures in the result"""
    try:
        return TargetResult(model.fqcn, source=model.render())
    except InjectGenError as e:
        logger.error('Failed to render %s: %s', model.fqcn, e)
        return TargetResult(model.fqcn, error=str(e))


class Generator:
    """Main injector generator"""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    def load(self, json_paths: list[str]) -> tuple[list[InjectorModel], list[TargetResult]]:
        """Build models for every target; bad targets are reported, not raised"""
        models: list[InjectorModel] = []
        failures: list[TargetResult] = []
        for json_path in json_paths:
            try:
                decls = loader.read_targets(json_path)
            except (InjectGenError, OSError) as e:
                logger.error('Failed to read %s: %s', json_path, e)
                failures.append(TargetResult(json_path, error=str(e)))
                continue

            for i, decl in enumerate(decls):
                try:
                    models.extend(loader.build_all([decl]))
                except InjectGenError as e:
                    name = _declared_name(decl) or f'{json_path}[{i}]'
                    logger.error('Failed to build %s: %s', name, e)
                    failures.append(TargetResult(name, error=str(e)))
        return models, failures

    def render_all(self, models: list[InjectorModel]) -> list[TargetResult]:
        """Render models, in parallel when configured; results keep input order"""
        if self.config.jobs <= 1 or len(models) <= 1:
            return [render_model(m) for m in models]

        results: list[Optional[TargetResult]] = [None] * len(models)
        with ThreadPoolExecutor(max_workers=self.config.jobs) as executor:
            futures = {executor.submit(render_model, m): i for i, m in enumerate(models)}
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        return results

    def write(self, model: InjectorModel, result: TargetResult):
        """Write a rendered result to its output file"""
        path = output_path(self.config.output_root, model)
        result.path = path
        if self.config.dry_run:
            logger.info('Would write %s', path)
            return
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, 'w', newline='\n', encoding='utf-8') as f:
            f.write(result.source)
        logger.debug('Wrote %s', path)

    def generate(self, json_paths: list[str]) -> GenerationReport:
        """Load, render and write every target described in the given files"""
        models, failures = self.load(json_paths)
        report = GenerationReport(results=list(failures))

        for model, result in zip(models, self.render_all(models)):
            if result.ok:
                try:
                    self.write(model, result)
                except OSError as e:
                    logger.error('Failed to write %s: %s', result.path, e)
                    result.error = str(e)
            report.results.append(result)

        logger.info('Generated %d injectors, %d failed',
                    len(report.succeeded), len(report.failed))
        return report


def _declared_name(decl) -> Optional[str]:
    if not isinstance(decl, dict) or 'class_name' not in decl:
        return None
    package = decl.get('package', '')
    return f"{package}.{decl['class_name']}" if package else decl['class_name']
