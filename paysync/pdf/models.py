from dataclasses import dataclass


@dataclass(frozen=True)
class SealPermissions:
    """Permission bits written into a sealed PDF.

    These are policy flags for whatever reader later opens the file;
    nothing here enforces them.
    """

    print_high_resolution: bool = True
    copy_content: bool = False
    modify_content: bool = False
    annotate: bool = False
    fill_forms: bool = True
    accessibility: bool = True
    assemble_document: bool = False


DEFAULT_PERMISSIONS = SealPermissions()
