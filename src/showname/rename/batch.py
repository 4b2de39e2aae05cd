# python
"""Batch rename utilities for release-named episode files.

This module scans a folder for video files, proposes new names using the
parser/formatter pair, and then either renames the files in place or creates
symbolic links carrying the new names. Before anything is touched it can
record the original names in a write-once manifest so a rename can be undone
by hand.

Failures never abort a batch: a filename that cannot be parsed is skipped and
reported, and a file-system error on one file is recorded against that file
while the rest of the batch continues.
"""
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

from showname.rename import formatter, parser
from showname.rename.formatter import EMPTY_SPEC, RenameSpec
from showname.utils import (
    MANIFEST_NAME,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_LINKED,
    STATUS_PLANNED,
    STATUS_RENAMED,
    STATUS_SKIP,
    STATUS_UNCHANGED,
    VIDEO_EXTENSIONS,
    LogLevel,
)
from showname.utils import logger


@dataclass
class RenamePlan:
    """A proposed rename (or link) for one source file and its outcome."""

    source: Path
    target: Path | None
    status: str = STATUS_PLANNED
    reason: str | None = None


@dataclass
class BatchReport:
    """Outcome of one batch run."""

    plans: list[RenamePlan] = field(default_factory=list)
    manifest_written: bool = False
    cancelled: bool = False

    def with_status(self, *statuses: str) -> list[RenamePlan]:
        return [p for p in self.plans if p.status in statuses]

    @property
    def failed(self) -> list[RenamePlan]:
        return self.with_status(STATUS_FAIL)

    @property
    def skipped(self) -> list[RenamePlan]:
        return self.with_status(STATUS_SKIP)

    def counts(self) -> Counter:
        return Counter(p.status for p in self.plans)


def collect_files(folder: Path, recursive: bool = False) -> list[Path]:
    """List video files under `folder`, sorted, ignoring symlinks."""
    entries = folder.rglob("*") if recursive else folder.iterdir()
    return sorted(
        p for p in entries
        if p.suffix in VIDEO_EXTENSIONS and p.is_file() and not p.is_symlink()
    )


def spec_for(file: Path, root: Path, spec: RenameSpec, recursive: bool) -> RenameSpec:
    """Return the spec for one file, taking the season from its directory in recursive mode.

    Files directly under `root` (or any file outside recursive mode) use the
    batch spec as-is. Deeper files use the season found in their parent
    directory label, falling back to the batch override when the label has
    no number.
    """
    if not recursive or file.parent == root:
        return spec
    season = parser.extract_season_from_label(file.parent.name)
    if season is None:
        return spec
    return RenameSpec(new_show_name=spec.new_show_name, season_override=season)


def plan_renames(
        files: list[Path],
        root: Path,
        spec: RenameSpec = EMPTY_SPEC,
        recursive: bool = False,
        link_dir: Path | None = None,
) -> list[RenamePlan]:
    """Parse and compose a new name for each file.

    Args:
        files (list[Path]): Source files, usually from `collect_files`.
        root (Path): Folder the batch was started in.
        spec (RenameSpec): Batch-wide overrides.
        recursive (bool): Derive seasons from subdirectory labels.
        link_dir (Path | None): Where link targets go; the relative layout
            below `root` is kept. Defaults to each file's own folder.

    Returns:
        list[RenamePlan]: One plan per file, `PLANNED`, `UNCHANGED` or `SKIP`.
    """
    plans: list[RenamePlan] = []
    claimed: dict[Path, Path] = {}

    for file in files:
        try:
            result = parser.parse(file.name)
        except parser.ParseError as e:
            logger.log("rename.parse.skip", LogLevel.WARN, file=str(file), reason=str(e))
            plans.append(RenamePlan(file, None, STATUS_SKIP, str(e)))
            continue

        new_name = formatter.compose(result, spec_for(file, root, spec, recursive))
        if link_dir is not None:
            target_dir = link_dir / file.parent.relative_to(root)
        else:
            target_dir = file.parent
        target = target_dir / new_name

        if target == file:
            claimed.setdefault(target, file)
            plans.append(RenamePlan(file, target, STATUS_UNCHANGED))
            continue
        if target in claimed:
            reason = f"same target as {claimed[target].name}"
            logger.log("rename.plan.duplicate", LogLevel.WARN, file=str(file), target=str(target))
            plans.append(RenamePlan(file, target, STATUS_SKIP, reason))
            continue

        claimed[target] = file
        logger.log(
            "rename.plan",
            LogLevel.DEBUG,
            file=file.name,
            target=new_name,
            strategy=result.strategy,
            season=result.season,
            episode=result.episode,
        )
        plans.append(RenamePlan(file, target))

    return plans


def _target_taken(plan: RenamePlan) -> bool:
    """True when the target already exists as another file or as any symlink."""
    target = plan.target
    if target.is_symlink():
        return True
    if not target.exists():
        return False
    # Case-only renames on case-insensitive filesystems point back at the source.
    return not target.samefile(plan.source)


def apply_plans(plans: list[RenamePlan], symlink: bool = False, dry_run: bool = False) -> None:
    """Rename or link every `PLANNED` entry, recording the outcome on each plan."""
    pending = [p for p in plans if p.status == STATUS_PLANNED]
    desc = "Linking files" if symlink else "Renaming files"

    for plan in tqdm(pending, desc=desc, disable=not pending):
        if dry_run:
            plan.status = STATUS_DRY_RUN
            continue

        if _target_taken(plan):
            plan.status, plan.reason = STATUS_FAIL, "target exists"
            logger.log("rename.apply.exists", LogLevel.WARN, file=str(plan.source), target=str(plan.target))
            continue

        try:
            if symlink:
                plan.target.parent.mkdir(parents=True, exist_ok=True)
                plan.target.symlink_to(plan.source.resolve())
                plan.status = STATUS_LINKED
            else:
                plan.source.rename(plan.target)
                plan.status = STATUS_RENAMED
        except OSError as e:
            plan.status, plan.reason = STATUS_FAIL, str(e)
            logger.log("rename.apply.fail", LogLevel.ERROR, file=str(plan.source), error=str(e))
            continue

        logger.log("rename.apply", LogLevel.DEBUG, file=plan.source.name, target=plan.target.name,
                   status=plan.status)


def write_manifest(folder: Path, names: list[str], manifest_name: str = MANIFEST_NAME) -> bool:
    """Write original names, one per line, unless the manifest already exists.

    Returns:
        bool: True when the manifest was written, False when one was already there.

    Raises:
        OSError: When the manifest cannot be written.
    """
    path = folder / manifest_name
    if path.exists():
        logger.log("rename.manifest.exists", LogLevel.INFO, path=str(path))
        return False
    path.write_text("".join(f"{name}\n" for name in names), encoding="utf-8")
    logger.log("rename.manifest.write", LogLevel.INFO, path=str(path), entries=len(names))
    return True


def rename_files(
        root_folder: Path,
        spec: RenameSpec = EMPTY_SPEC,
        recursive: bool = False,
        symlink: bool = False,
        link_dir: Path | None = None,
        manifest: bool = True,
        manifest_name: str = MANIFEST_NAME,
        dry_run: bool = False,
        confirm: bool = True,
) -> BatchReport:
    """Rename (or link) release-named episode files under `root_folder`.

    The function:
    - Collects video files (recursively when asked).
    - Builds a proposed name for each and displays the list.
    - Asks for confirmation unless `confirm=False`.
    - Writes the original-names manifest, then applies the plans.

    Args:
        root_folder (Path): Folder to scan.
        spec (RenameSpec): Replacement show name and season override for the batch.
        recursive (bool): Walk subdirectories; "Season N" folder labels supply seasons.
        symlink (bool): Create symbolic links with the new names instead of renaming.
        link_dir (Path | None): Destination folder for links (default: beside each source).
        manifest (bool): Record original names before renaming.
        manifest_name (str): Manifest filename, created in `root_folder`.
        dry_run (bool): Only show proposed renames.
        confirm (bool): Prompt before applying.

    Returns:
        BatchReport: Every plan with its final status.
    """
    root = Path(root_folder)
    report = BatchReport()
    if not root.is_dir():
        logger.log("rename.error", LogLevel.ERROR, msg="Folder does not exist", root=str(root))
        return report

    files = collect_files(root, recursive)
    logger.log("rename.start", LogLevel.INFO, root=str(root), files_found=len(files), recursive=recursive,
               symlink=symlink, dry_run=dry_run)
    report.plans = plan_renames(files, root, spec, recursive=recursive,
                                link_dir=Path(link_dir) if symlink and link_dir else None)

    pending = report.with_status(STATUS_PLANNED)
    for plan in report.skipped:
        logger.safe_print(f"⚠️ Skipped {plan.source.name}: {plan.reason}")

    if not pending:
        logger.safe_print("⚠️ No matching files found to rename.")
        return report

    logger.safe_print("\n📋 Proposed renames:")
    for plan in pending:
        logger.safe_print(f"{plan.source.name} → {plan.target}")
    logger.safe_print(f"\nTotal files: {len(pending)}")

    if dry_run:
        apply_plans(pending, symlink=symlink, dry_run=True)
        logger.safe_print("\n🧪 Dry-run mode: no changes will be made.")
        return report

    if confirm:
        answer = input("\nProceed with all renames? (y/n): ").strip().lower()
        if answer != "y":
            logger.safe_print("❌ Rename canceled.")
            report.cancelled = True
            return report

    if manifest:
        names = [plan.source.relative_to(root).as_posix() for plan in pending]
        try:
            report.manifest_written = write_manifest(root, names, manifest_name)
        except OSError as e:
            logger.log("rename.manifest.fail", LogLevel.ERROR, root=str(root), error=str(e))
            for plan in pending:
                plan.status, plan.reason = STATUS_FAIL, "manifest not written"
            return report

    apply_plans(pending, symlink=symlink)

    counts = report.counts()
    logger.log(
        "rename.end",
        LogLevel.INFO,
        renamed=counts[STATUS_RENAMED],
        linked=counts[STATUS_LINKED],
        unchanged=counts[STATUS_UNCHANGED],
        skip=counts[STATUS_SKIP],
        fail=counts[STATUS_FAIL],
    )
    return report
