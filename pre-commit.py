import subprocess
import sys


def run(cmd, check=True, capture=False, text=True):
    """Helper to run shell commands comfortably."""
    print(f"⚙️  Exec: {' '.join(cmd)}")
    return subprocess.run(cmd, check=check, capture_output=capture, text=text)


def git_status_has_changes():
    return bool(run(["git", "status", "--porcelain"], capture=True).stdout.strip())


# --- TASKS ---


def task_format():
    print("\n🔍 --- 1. FORMATTING & SYNTAX CHECK ---")

    # Runs Ruff using the rules defined in pyproject.toml
    result = run(["uv", "run", "ruff", "check", "--fix", "."], check=False)

    if result.returncode != 0:
        print("❌ Critical errors or syntax issues found. Fix them before staging.")
        return False

    run(["uv", "run", "ruff", "format", "."], check=False)

    if git_status_has_changes():
        print("✅ Linting fixes applied and staged.")
        run(["git", "add", "."])
        return True

    print("✨ Code style is already perfect.")
    return True


def task_tests():
    print("\n🧪 --- 2. TESTS ---")
    result = run(["uv", "run", "pytest", "-q"], check=False)
    if result.returncode != 0:
        print("❌ Tests failed.")
        return False
    print("✅ All tests passed.")
    return True


def main():
    if not task_format():
        sys.exit(1)
    if "--skip-tests" not in sys.argv and not task_tests():
        sys.exit(1)
    print("\n✨ Clean run. Ready to commit.")


if __name__ == "__main__":
    main()
