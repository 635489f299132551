"""Interactive prompts shared by CLI commands."""


def confirm(prompt: str, args) -> bool:
    """Ask a yes/no question unless ``--yes`` was given."""
    if getattr(args, "yes", False):
        return True
    return input(f"\n{prompt} (yes/no): ").strip().lower() == "yes"
