"""Model merge engine.

Computes the direct-side difference between two build models and writes it
back to the build script through a :class:`ScriptEditor`, one category
(phase) at a time in a fixed order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from gradlesync.contracts.exceptions import MergeError, ScriptEditError
from gradlesync.contracts.merge import MergePhase, MergePlan
from gradlesync.contracts.model import BuildModel, Dependency
from gradlesync.contracts.script import PROJECT_PROPERTY_PREFIX, EditOperation, ScriptEdit, ScriptEditor
from gradlesync.engine.progress import MergeProgress, NullMergeProgress
from gradlesync.engine.utils import subtract, subtract_mapping
from gradlesync.model.plugins import plugin_for_packaging

logger = logging.getLogger(__name__)

PHASE_PROJECT = "Project"
PHASE_TASKS = "Tasks"
PHASE_DEPENDENCIES = "Dependencies"
PHASE_MANAGED_DEPENDENCIES = "Managed"
PHASE_PLUGINS = "Plugins"
PHASE_REPOSITORIES = "Repositories"
PHASE_PROPERTIES = "Properties"

EditGenerator = Callable[[BuildModel, BuildModel], Iterator[ScriptEdit]]


def _edit(operation: EditOperation, *arguments: object) -> ScriptEdit:
    return ScriptEdit(operation=operation, arguments=arguments)


def _is_full_declaration(dependency: Dependency) -> bool:
    return bool(dependency.version) and bool(dependency.configuration_name)


def project_edits(old: BuildModel, new: BuildModel) -> Iterator[ScriptEdit]:
    if new.group != old.group:
        yield _edit(EditOperation.SET_PROPERTY, "group", new.group)
    if new.version != old.version:
        yield _edit(EditOperation.SET_PROPERTY, "version", new.version)
    if new.archive_name != old.archive_name:
        yield _edit(EditOperation.SET_ARCHIVE_NAME, new.archive_name)
    if new.packaging != old.packaging:
        # Gradle has no packaging field; packaging follows from the applied plugin.
        yield _edit(EditOperation.INSERT_PLUGIN, plugin_for_packaging(new.packaging).identifier)
    if new.source_compatibility != old.source_compatibility:
        yield _edit(EditOperation.SET_PROPERTY, "sourceCompatibility", new.source_compatibility)
    if new.target_compatibility != old.target_compatibility:
        yield _edit(EditOperation.SET_PROPERTY, "targetCompatibility", new.target_compatibility)


def task_edits(old: BuildModel, new: BuildModel) -> Iterator[ScriptEdit]:
    for task in new.tasks:
        yield _edit(EditOperation.INSERT_TASK, task.name, task.depends_on_names, task.type, task.code)


def dependency_edits(old: BuildModel, new: BuildModel) -> Iterator[ScriptEdit]:
    for dependency in subtract(new.dependencies, old.dependencies):
        if _is_full_declaration(dependency):
            yield _edit(EditOperation.INSERT_DEPENDENCY, dependency)
        else:
            yield _edit(EditOperation.INSERT_DIRECT_DEPENDENCY, dependency.group, dependency.name)
    for dependency in subtract(old.dependencies, new.dependencies):
        if _is_full_declaration(dependency):
            yield _edit(EditOperation.REMOVE_DEPENDENCY, dependency)
        else:
            yield _edit(EditOperation.REMOVE_DIRECT_DEPENDENCY, dependency.group, dependency.name)


def managed_dependency_edits(old: BuildModel, new: BuildModel) -> Iterator[ScriptEdit]:
    for dependency in subtract(new.managed_dependencies, old.managed_dependencies):
        yield _edit(EditOperation.INSERT_MANAGED_DEPENDENCY, dependency)
    for dependency in subtract(old.managed_dependencies, new.managed_dependencies):
        yield _edit(EditOperation.REMOVE_MANAGED_DEPENDENCY, dependency)


def plugin_edits(old: BuildModel, new: BuildModel) -> Iterator[ScriptEdit]:
    for plugin in subtract(new.plugins, old.plugins):
        yield _edit(EditOperation.INSERT_PLUGIN, plugin.identifier)
    for plugin in subtract(old.plugins, new.plugins):
        yield _edit(EditOperation.REMOVE_PLUGIN, plugin.identifier)


def repository_edits(old: BuildModel, new: BuildModel) -> Iterator[ScriptEdit]:
    for repository in subtract(new.repositories, old.repositories):
        yield _edit(EditOperation.INSERT_REPOSITORY, repository.url)
    for repository in subtract(old.repositories, new.repositories):
        yield _edit(EditOperation.REMOVE_REPOSITORY, repository.url)


def property_edits(old: BuildModel, new: BuildModel) -> Iterator[ScriptEdit]:
    # A changed value is removed first, then set again.
    for key in subtract_mapping(old.properties, new.properties):
        yield _edit(EditOperation.REMOVE_PROPERTY, PROJECT_PROPERTY_PREFIX + key)
    for key, value in subtract_mapping(new.properties, old.properties).items():
        yield _edit(EditOperation.SET_PROPERTY, PROJECT_PROPERTY_PREFIX + key, value)


PHASES: tuple[tuple[str, EditGenerator], ...] = (
    (PHASE_PROJECT, project_edits),
    (PHASE_TASKS, task_edits),
    (PHASE_DEPENDENCIES, dependency_edits),
    (PHASE_MANAGED_DEPENDENCIES, managed_dependency_edits),
    (PHASE_PLUGINS, plugin_edits),
    (PHASE_REPOSITORIES, repository_edits),
    (PHASE_PROPERTIES, property_edits),
)


class ModelMerger:
    """Write the direct-side difference between two models back to a script.

    By default each phase is applied as soon as its edits are computed, so a
    failure leaves earlier edits applied; the raised :class:`MergeError` or
    :class:`ScriptEditError` carries that text as ``partial_script``.
    With ``transactional=True`` the full plan is computed before the first edit.
    """

    def __init__(
        self,
        editor: ScriptEditor,
        *,
        progress: MergeProgress | None = None,
        transactional: bool = False,
    ) -> None:
        self._editor = editor
        self._progress: MergeProgress = progress or NullMergeProgress()
        self._transactional = transactional

    def plan(self, old: BuildModel, new: BuildModel) -> MergePlan:
        return MergePlan(phases=[MergePhase(name=name, edits=list(generate(old, new))) for name, generate in PHASES])

    def apply(self, script: str, plan: MergePlan) -> str:
        for phase in plan.phases:
            script = self._apply_phase(script, phase.name, phase.edits, total=len(phase.edits))
        logger.info("Applied %d script edit(s)", len(plan.edits))
        return script

    def merge(self, script: str, old: BuildModel, new: BuildModel) -> str:
        if self._transactional:
            return self.apply(script, self.plan(old, new))
        for name, generate in PHASES:
            script = self._apply_phase(script, name, generate(old, new), total=None)
        return script

    def _apply_phase(self, script: str, phase: str, edits: Iterable[ScriptEdit], *, total: int | None) -> str:
        self._progress.phase_start(phase, total=total)
        try:
            for edit in edits:
                logger.debug("%s: %s", phase, edit.describe())
                script = edit.apply(self._editor, script)
                self._progress.item_done(phase)
        except (MergeError, ScriptEditError) as exc:
            exc.partial_script = script
            self._progress.phase_error(phase, exc)
            raise
        except BaseException as exc:
            self._progress.phase_error(phase, exc)
            raise
        self._progress.phase_done(phase)
        return script
