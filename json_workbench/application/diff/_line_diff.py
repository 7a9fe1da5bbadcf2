# json_workbench/application/diff/_line_diff.py

"""Line-oriented comparison of two documents"""

# Standard library imports
from difflib import SequenceMatcher

# Local imports
from json_workbench.core.domain.enums import DiffType
from json_workbench.core.domain.results import DiffSummary
from json_workbench.core.domain.results import LineDiff


def diff_lines(old_text: str, new_text: str) -> list[LineDiff]:
    """Diff two texts line by line

    Unchanged and removed lines carry their line number in ``old_text``; added
    lines carry their line number in ``new_text``. A replaced block appears as
    its removed lines followed by its added lines.
    """
    old_lines = old_text.split("\n")
    new_lines = new_text.split("\n")
    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)

    diffs: list[LineDiff] = []
    for tag, old_start, old_end, new_start, new_end in matcher.get_opcodes():
        if tag == "equal":
            diffs.extend(
                LineDiff(line_number=index + 1, type=DiffType.UNCHANGED, content=old_lines[index])
                for index in range(old_start, old_end)
            )
            continue
        diffs.extend(
            LineDiff(line_number=index + 1, type=DiffType.REMOVED, content=old_lines[index])
            for index in range(old_start, old_end)
        )
        diffs.extend(
            LineDiff(line_number=index + 1, type=DiffType.ADDED, content=new_lines[index])
            for index in range(new_start, new_end)
        )
    return diffs


def get_diff_summary(diffs: list[LineDiff]) -> DiffSummary:
    """Count added, removed and changed lines

    A removed line directly followed, within the same block, by an added line
    is counted once as changed.
    """
    added = removed = changed = 0
    pending_removed = 0
    for diff in diffs:
        if diff.type is DiffType.REMOVED:
            pending_removed += 1
        elif diff.type is DiffType.ADDED:
            if pending_removed:
                pending_removed -= 1
                changed += 1
            else:
                added += 1
        else:
            removed += pending_removed
            pending_removed = 0
    removed += pending_removed
    return DiffSummary(added=added, removed=removed, changed=changed)
