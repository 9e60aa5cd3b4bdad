#!/usr/bin/env python3
"""
7z File Compressor
Collects files and hands them to the external 7-Zip executable to build a
.7z archive, optionally with AES-256 encryption.
"""

import argparse
import getpass
import json
import os
import shlex
import shutil
import subprocess
import sys

__version__ = "1.0.0"

DEFAULT_ARCHIVE_NAME = "archive.7z"
ARCHIVE_EXTENSION = ".7z"
DEFAULT_COMPRESSION_LEVEL = 5
MIN_COMPRESSION_LEVEL = 0
MAX_COMPRESSION_LEVEL = 9

SEVEN_ZIP_NAMES = ["7z", "7zz", "7za"]

# Checked after PATH lookup fails
SEVEN_ZIP_LOCATIONS = [
    r"C:\Program Files\7-Zip\7z.exe",
    r"C:\Program Files (x86)\7-Zip\7z.exe",
    "/opt/homebrew/bin/7zz",  # Apple Silicon Homebrew
    "/opt/homebrew/bin/7z",
    "/usr/local/bin/7zz",  # Intel Homebrew
    "/usr/local/bin/7z",
    "/usr/bin/7z",
    "/usr/bin/7za",
]

# Documented 7-Zip exit codes
SEVEN_ZIP_EXIT_CODES = {
    1: "Warning (non-fatal errors, e.g. some files were locked or missing)",
    2: "Fatal error",
    7: "Command line error",
    8: "Not enough memory for operation",
    255: "User stopped the process",
}

CONFIG_ENV_VAR = "SEVENZIP_COMPRESSOR_CONFIG"
EXECUTABLE_ENV_VAR = "SEVENZIP_PATH"


class Colors:
    """ANSI color codes optimized for both light and dark terminals"""
    BLUE = '\033[34m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    RED = '\033[31m'
    PURPLE = '\033[35m'
    CYAN = '\033[36m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    DEFAULT = '\033[39m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        """Blank every code, used for pipes and NO_COLOR"""
        for name in ("BLUE", "GREEN", "YELLOW", "RED", "PURPLE", "CYAN",
                     "BOLD", "DIM", "DEFAULT", "END"):
            setattr(cls, name, "")


if os.environ.get("NO_COLOR") or not sys.stdout.isatty():
    Colors.disable()


def print_success(message):
    print(f"{Colors.GREEN}SUCCESS: {message}{Colors.END}")


def print_error(message):
    print(f"{Colors.RED}ERROR: {message}{Colors.END}")


def print_info(message):
    print(f"{Colors.CYAN}INFO: {message}{Colors.END}")


def print_warning(message):
    print(f"{Colors.YELLOW}WARNING: {message}{Colors.END}")


def format_size(size_bytes):
    """Format file size for display"""
    if size_bytes < 1024**2:
        return f"{size_bytes / 1024:.1f}KB"
    elif size_bytes < 1024**3:
        return f"{size_bytes / (1024**2):.1f}MB"
    else:
        return f"{size_bytes / (1024**3):.1f}GB"


def clean_path(path):
    """Strip whitespace and the quotes terminals add around dropped paths"""
    return os.path.expanduser(path.strip().strip('"\''))


def find_seven_zip(preferred=None):
    """Locate the 7-Zip executable, returning None when it is not installed"""
    candidates = []
    if preferred:
        candidates.append(preferred)
    if os.environ.get(EXECUTABLE_ENV_VAR):
        candidates.append(os.environ[EXECUTABLE_ENV_VAR])

    for candidate in candidates:
        found = shutil.which(candidate)
        if found:
            return found
        if os.path.isfile(candidate):
            return candidate

    for name in SEVEN_ZIP_NAMES:
        found = shutil.which(name)
        if found:
            return found

    for path in SEVEN_ZIP_LOCATIONS:
        if os.path.isfile(path):
            return path

    return None


def mask_command(cmd):
    """Copy of cmd that is safe to print"""
    masked = []
    for i, arg in enumerate(cmd):
        if arg == "--":
            # file names follow, leave them alone
            return masked + list(cmd[i:])
        masked.append("-p***" if arg.startswith("-p") and len(arg) > 2 else arg)
    return masked


def describe_exit_code(returncode):
    meaning = SEVEN_ZIP_EXIT_CODES.get(returncode, "Unknown error")
    return f"7-Zip exited with code {returncode}: {meaning}"


def collect_sizes(paths):
    """Total byte size and file count of paths, walking directories"""
    total_size = 0
    file_count = 0
    for source in paths:
        if os.path.isfile(source):
            total_size += os.path.getsize(source)
            file_count += 1
        elif os.path.isdir(source):
            for root, dirs, files in os.walk(source):
                for file in files:
                    try:
                        total_size += os.path.getsize(os.path.join(root, file))
                        file_count += 1
                    except OSError:
                        pass
    return total_size, file_count


class Preferences:
    """User preferences stored as JSON in the home directory"""

    DEFAULTS = {
        "compression_level": DEFAULT_COMPRESSION_LEVEL,
        "seven_zip_path": None,
        "remember_last_directory": True,
        "last_output_directory": None,
    }

    def __init__(self, config_file=None):
        self.config_file = (config_file
                            or os.environ.get(CONFIG_ENV_VAR)
                            or os.path.expanduser("~/.7z_compressor_preferences.json"))
        self.values = self.load()

    def load(self):
        """Load preferences, merged over the defaults"""
        values = dict(self.DEFAULTS)
        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r') as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top level is not an object")
                values.update(loaded)
        except (ValueError, OSError) as e:
            print_warning(f"Could not load preferences ({e}), using defaults")
            return dict(self.DEFAULTS)

        level = values.get("compression_level")
        if isinstance(level, bool) or not isinstance(level, int) \
                or not MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL:
            print_warning(f"Ignoring invalid compression level in preferences: {level!r}")
            values["compression_level"] = DEFAULT_COMPRESSION_LEVEL

        seven_zip_path = values.get("seven_zip_path")
        if seven_zip_path is not None and not isinstance(seven_zip_path, str):
            print_warning(f"Ignoring invalid 7-Zip path in preferences: {seven_zip_path!r}")
            values["seven_zip_path"] = None
        return values

    def save(self):
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.values, f, indent=2)
        except OSError as e:
            print_warning(f"Could not save preferences: {e}")

    def get(self, key):
        return self.values.get(key, self.DEFAULTS.get(key))

    def set(self, key, value):
        self.values[key] = value
        self.save()

    def remember_output(self, output_path):
        """Record the directory of a finished archive if the user wants that"""
        if not self.get("remember_last_directory"):
            return
        output_dir = os.path.dirname(os.path.abspath(output_path))
        if os.path.isdir(output_dir):
            self.set("last_output_directory", output_dir)


class SevenZipCompressor:
    """Inputs for one archive and the 7-Zip call that produces it"""

    def __init__(self, compression_level=DEFAULT_COMPRESSION_LEVEL, seven_zip_path=None):
        self.files = []
        self.output_path = None  # None means derive from the inputs
        self.compression_level = compression_level
        self.encrypt = False
        self.password = None
        self.overwrite = False
        self.seven_zip_path = seven_zip_path
        self.last_returncode = None

    @staticmethod
    def _key(path):
        return os.path.normcase(os.path.normpath(path))

    def add_files(self, paths):
        """Add existing paths, returning (added, missing)"""
        known = {self._key(p) for p in self.files}
        added = []
        missing = []

        for path in paths:
            if not path or not path.strip():
                continue
            cleaned = clean_path(path)
            if not os.path.exists(cleaned):
                missing.append(cleaned)
                continue

            abs_path = os.path.abspath(cleaned)
            key = self._key(abs_path)
            if key in known:
                continue
            known.add(key)
            self.files.append(abs_path)
            added.append(abs_path)

        return added, missing

    def add_files_from_list(self, list_path):
        """Add paths from a text file, one per line; OSError propagates"""
        with open(clean_path(list_path), 'r') as f:
            paths = [line.strip() for line in f]
        return self.add_files([p for p in paths if p and not p.startswith('#')])

    def remove_file(self, index):
        """Remove by 1-based position, returning the path or None"""
        if 1 <= index <= len(self.files):
            return self.files.pop(index - 1)
        return None

    def clear_files(self):
        self.files = []

    def enable_encryption(self, password):
        self.encrypt = True
        self.password = password

    def disable_encryption(self):
        self.encrypt = False
        self.password = None

    def derive_output_path(self):
        """Archive path suggested by the current inputs"""
        if not self.files:
            return os.path.join(os.getcwd(), DEFAULT_ARCHIVE_NAME)

        inputs = {self._key(p) for p in self.files}

        if len(self.files) == 1:
            source = self.files[0]
            base_name = os.path.basename(source)
            if os.path.isfile(source):
                base_name = os.path.splitext(base_name)[0] or base_name
            parent = os.path.dirname(source)
        else:
            try:
                parent = os.path.commonpath(self.files)
            except ValueError:
                # Different drives on Windows
                parent = os.path.dirname(self.files[0])
            base_name = os.path.basename(parent)
            # A folder that contains the other inputs must not receive its own archive
            if self._key(parent) in inputs:
                parent = os.path.dirname(parent)

        if not base_name:
            return os.path.join(parent, DEFAULT_ARCHIVE_NAME)
        path = os.path.join(parent, base_name + ARCHIVE_EXTENSION)
        if self._key(path) in inputs:
            path = os.path.join(parent, f"{base_name}_archive{ARCHIVE_EXTENSION}")
        return path

    def resolve_output_path(self):
        """Explicit output path if set, derived otherwise, always ending in .7z"""
        if self.output_path is None or not self.output_path.strip():
            return self.derive_output_path()

        path = clean_path(self.output_path)
        if os.path.isdir(path) or path.endswith(("/", "\\")):
            path = os.path.join(path, os.path.basename(self.derive_output_path()))
        elif not path.lower().endswith(ARCHIVE_EXTENSION):
            path += ARCHIVE_EXTENSION
        return os.path.abspath(path)

    def validate(self):
        """List of problems that prevent compression; empty when ready"""
        problems = []

        if not self.files:
            problems.append("No input files selected")
        for path in self.files:
            if not os.path.exists(path):
                problems.append(f"Input file not found: {path}")

        level = self.compression_level
        if isinstance(level, bool) or not isinstance(level, int) \
                or not MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL:
            problems.append(
                f"Compression level must be between {MIN_COMPRESSION_LEVEL} "
                f"and {MAX_COMPRESSION_LEVEL}, got {level!r}")

        if self.encrypt and not self.password:
            problems.append("Encryption is enabled but the password is empty")

        if self.output_path is not None and not self.output_path.strip():
            problems.append("Output path is empty")

        return problems

    def build_command(self, seven_zip, output_path):
        cmd = [seven_zip, "a", "-t7z", f"-mx{self.compression_level}"]

        if self.encrypt and self.password:
            cmd.append(f"-p{self.password}")
            cmd.append("-mhe=on")  # also hide file names

        # -y keeps 7-Zip from prompting on stdin
        cmd.append("-y")
        cmd.append("--")
        cmd.append(output_path)
        cmd.extend(self.files)
        return cmd

    def compress(self, seven_zip=None, show_command=False):
        """Run 7-Zip, returning (success, archive path or error message)"""
        problems = self.validate()
        if problems:
            return False, "; ".join(problems)

        seven_zip = seven_zip or find_seven_zip(self.seven_zip_path)
        if not seven_zip:
            return False, ("7-Zip executable not found. Install 7-Zip or point "
                           f"{EXECUTABLE_ENV_VAR} at it")

        output_path = self.resolve_output_path()

        parent_dir = os.path.dirname(output_path)
        if parent_dir and not os.path.isdir(parent_dir):
            try:
                os.makedirs(parent_dir, exist_ok=True)
            except OSError as e:
                return False, f"Cannot create directory {parent_dir}: {e}"
            print_info(f"Created directory: {parent_dir}")

        if os.path.isdir(output_path):
            return False, f"Output path is a directory: {output_path}"

        if self.overwrite and os.path.exists(output_path):
            try:
                os.remove(output_path)
            except OSError as e:
                return False, f"Cannot replace existing archive {output_path}: {e}"

        cmd = self.build_command(seven_zip, output_path)
        if show_command:
            print(f"{Colors.DIM}{shlex.join(mask_command(cmd))}{Colors.END}")

        self.last_returncode = None
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            return False, f"Could not start 7-Zip: {e}"

        self.last_returncode = result.returncode
        if result.returncode != 0:
            return False, describe_exit_code(result.returncode)
        return True, output_path

    def archive_summary(self, archive_path):
        """Sizes and ratio of a finished archive, or None if it is missing"""
        if not os.path.isfile(archive_path):
            return None

        archive_size = os.path.getsize(archive_path)
        source_size, file_count = collect_sizes(self.files)
        if source_size > 0:
            saved = ((source_size - archive_size) / source_size) * 100
        else:
            saved = 0.0

        return {
            "archive_path": archive_path,
            "archive_size": archive_size,
            "source_size": source_size,
            "file_count": file_count,
            "saved_percent": saved,
        }


def show_archive_completion(compressor, archive_path):
    """Print the completion report for a freshly created archive"""
    summary = compressor.archive_summary(archive_path)
    if summary is None:
        print_warning(f"7-Zip reported success but {archive_path} was not found")
        return

    print(f"\n{Colors.GREEN}Archive created successfully!{Colors.END}")
    print(f"{Colors.CYAN}Archive: {summary['archive_path']}{Colors.END}")
    print(f"{Colors.CYAN}Size: {format_size(summary['source_size'])} → "
          f"{format_size(summary['archive_size'])} "
          f"({summary['saved_percent']:.1f}% smaller){Colors.END}")
    print(f"{Colors.CYAN}Files: {summary['file_count']} processed{Colors.END}")
    print(f"{Colors.CYAN}Encryption: {'AES-256 (headers encrypted)' if compressor.encrypt else 'None'}{Colors.END}")


def ask_password(prompt=None):
    """Ask for a password twice, returning None on mismatch or empty input"""
    prompt = prompt or getpass.getpass
    password = prompt(f"{Colors.DEFAULT}Password: {Colors.END}")
    if not password:
        print_error("Password cannot be empty")
        return None

    confirm = prompt(f"{Colors.DEFAULT}Confirm password: {Colors.END}")
    if password != confirm:
        print_error("Passwords don't match")
        return None
    return password


class CompressorMenu:
    """Interactive text menu around a SevenZipCompressor"""

    def __init__(self, compressor, preferences, input_func=None, password_func=None,
                 overwrite=False, show_command=False):
        self.compressor = compressor
        self.preferences = preferences
        self.input = input_func or input
        self.password_func = password_func
        self.overwrite = overwrite  # replace existing archives without asking
        self.show_command = show_command

    def ask(self, prompt):
        return self.input(f"{Colors.DEFAULT}{prompt}{Colors.END}").strip()

    def print_header(self):
        print(f"\n{Colors.PURPLE}{'─'*60}{Colors.END}")
        print(f"{Colors.BOLD}7z FILE COMPRESSOR{Colors.END}")
        print(f"{Colors.PURPLE}{'─'*60}{Colors.END}")

    def print_settings(self):
        c = self.compressor
        output = c.output_path if c.output_path else f"(auto) {c.resolve_output_path()}"
        print(f"\n{Colors.BOLD}Current Settings:{Colors.END}")
        print(f"• Files: {len(c.files)}")
        print(f"• Output: {output}")
        print(f"• Compression: Level {c.compression_level}")
        print(f"• Encryption: {'AES-256' if c.encrypt else 'Off'}")

    def add_files(self):
        print(f"\n{Colors.BOLD}Add Files:{Colors.END}")
        print("• Type or drag paths, one per line")
        print("• Press Enter on an empty line when done")

        while True:
            path = self.ask("Path: ")
            if not path:
                break
            added, missing = self.compressor.add_files([path])
            for p in added:
                print_success(f"Added: {os.path.basename(p) or p}")
            for p in missing:
                print_warning(f"File or folder not found: {p}")
            if not added and not missing:
                print_info("Already in the list")

    def add_files_from_list(self):
        list_path = self.ask("Path to text file with file list (one per line): ")
        if not list_path:
            return
        try:
            added, missing = self.compressor.add_files_from_list(list_path)
        except OSError as e:
            print_error(f"Error reading file list: {e}")
            return

        for p in missing:
            print_warning(f"File not found (skipping): {p}")
        if added:
            print_success(f"Loaded {len(added)} files from list")
        else:
            print_warning("No new files found in the file list")

    def list_files(self):
        if not self.compressor.files:
            print_info("No files selected")
            return
        print(f"\n{Colors.BOLD}Selected Files:{Colors.END}")
        for i, path in enumerate(self.compressor.files, 1):
            print(f"{i:3}. {path}")

    def remove_file(self):
        self.list_files()
        if not self.compressor.files:
            return
        choice = self.ask("Number to remove: ")
        try:
            index = int(choice)
        except ValueError:
            print_warning("Please enter a valid number")
            return
        removed = self.compressor.remove_file(index)
        if removed is None:
            print_warning(f"No file number {index}")
        else:
            print_success(f"Removed: {removed}")

    def clear_files(self):
        self.compressor.clear_files()
        print_success("File list cleared")

    def set_output_path(self):
        print(f"Suggested: {self.compressor.derive_output_path()}")
        last_dir = self.preferences.get("last_output_directory")
        if last_dir and os.path.isdir(last_dir):
            print(f"Last used folder: {last_dir} (type 'last' to use it)")

        path = self.ask("Output archive path (Enter for automatic): ")
        if path.lower() == "last" and last_dir:
            path = os.path.join(last_dir, "")
        self.compressor.output_path = path or None
        print_info(f"Archive will be written to {self.compressor.resolve_output_path()}")

    def set_compression_level(self):
        print(f"\n{Colors.BOLD}Compression Level:{Colors.END}")
        print("0 - Store (no compression)")
        print("1 - Fastest")
        print("5 - Normal (recommended)")
        print("9 - Ultra")

        level = self.ask(f"Choose level (0-9, default {self.compressor.compression_level}): ")
        if not level:
            return
        try:
            level = int(level)
        except ValueError:
            print_warning("Please enter a valid number")
            return
        if not MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL:
            print_warning("Please enter a number between 0 and 9")
            return
        if level >= 7:
            print_warning(f"Level {level} uses significant memory and time")
        self.compressor.compression_level = level
        self.preferences.set("compression_level", level)

    def toggle_encryption(self):
        if self.compressor.encrypt:
            self.compressor.disable_encryption()
            print_info("Encryption disabled")
            return

        password = ask_password(self.password_func)
        if password is None:
            return
        if len(password) < 4:
            print_warning("Short passwords are easy to guess")
        self.compressor.enable_encryption(password)
        print_success("Encryption enabled (AES-256, headers encrypted)")

    def create_archive(self):
        c = self.compressor
        problems = c.validate()
        if problems:
            for problem in problems:
                print_error(problem)
            return False

        output_path = c.resolve_output_path()
        c.overwrite = self.overwrite
        if os.path.isfile(output_path) and self.overwrite:
            print_warning(f"File already exists and will be replaced: {output_path}")
        elif os.path.isfile(output_path):
            print_warning(f"File already exists: {output_path}")
            print(f"{Colors.CYAN}1. Overwrite existing file{Colors.END}")
            print(f"{Colors.CYAN}2. Add to existing archive{Colors.END}")
            print(f"{Colors.CYAN}3. Cancel{Colors.END}")
            choice = self.ask("Choose option (1-3): ")
            if choice == "1":
                c.overwrite = True
            elif choice != "2":
                print_warning("Operation cancelled")
                return False

        print(f"\n{Colors.BOLD}Summary:{Colors.END}")
        print(f"Files: {len(c.files)}")
        print(f"Output: {output_path}")
        print(f"Password: {'Yes (AES-256)' if c.encrypt else 'No'}")
        print(f"Compression: Level {c.compression_level}")
        if not c.encrypt:
            print_warning("Archive will be unencrypted")

        if self.ask("Create archive? (y/n): ").lower() not in ['y', 'yes']:
            return False

        print(f"\n{Colors.CYAN}Running 7-Zip...{Colors.END}")
        success, message = c.compress(show_command=self.show_command)
        if not success:
            print_error(f"Archive creation failed: {message}")
            return False

        show_archive_completion(c, message)
        self.preferences.remember_output(message)
        return True

    def run(self):
        actions = {
            "1": self.add_files,
            "2": self.add_files_from_list,
            "3": self.remove_file,
            "4": self.list_files,
            "5": self.clear_files,
            "6": self.set_output_path,
            "7": self.set_compression_level,
            "8": self.toggle_encryption,
            "9": self.create_archive,
        }

        while True:
            self.print_header()
            self.print_settings()

            print(f"\n{Colors.BOLD}Main Menu:{Colors.END}")
            print("1. Add Files")
            print("2. Add Files From List")
            print("3. Remove File")
            print("4. Show Files")
            print("5. Clear Files")
            print("6. Set Output Path")
            print("7. Set Compression Level")
            print(f"8. {'Disable' if self.compressor.encrypt else 'Enable'} Encryption")
            print("9. Create Archive")
            print("0. Exit")

            try:
                choice = self.ask("Choose option (0-9): ")
                if choice in ("0", "q", "exit"):
                    print(f"{Colors.GREEN}Goodbye!{Colors.END}")
                    return
                action = actions.get(choice)
                if action is None:
                    print_warning("Invalid choice. Please enter 0-9.")
                else:
                    action()
            except KeyboardInterrupt:
                print(f"\n\n{Colors.GREEN}Goodbye!{Colors.END}")
                return
            except EOFError:
                return


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sevenzip-compressor",
        description="Create .7z archives with the 7-Zip executable",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sevenzip-compressor report.pdf                    # -> report.7z beside it
  sevenzip-compressor docs/a.txt docs/b.txt         # -> docs/docs.7z
  sevenzip-compressor photos/ -o backup.7z -l 9
  sevenzip-compressor secrets.txt -e                # prompts for a password
  sevenzip-compressor --from-file list.txt -o out/files.7z
  sevenzip-compressor                               # interactive menu

Exit status is 0 on success, 1 on invalid input, otherwise 7-Zip's exit code.
        """)

    parser.add_argument('files', nargs='*', metavar='FILE',
                        help='files or folders to archive')
    parser.add_argument('-o', '--output', default=None,
                        help='archive path (derived from the inputs when omitted)')
    parser.add_argument('-l', '--level', type=int, default=None,
                        choices=range(MIN_COMPRESSION_LEVEL, MAX_COMPRESSION_LEVEL + 1),
                        metavar='0-9', help='compression level (default: from preferences, 5)')
    encryption = parser.add_mutually_exclusive_group()
    encryption.add_argument('-p', '--password', default=None,
                            help='encrypt with AES-256 using this password')
    encryption.add_argument('-e', '--encrypt', action='store_true',
                            help='encrypt with AES-256, prompting for the password')
    parser.add_argument('--from-file', metavar='LIST',
                        help='read additional paths from a text file, one per line')
    parser.add_argument('--7z', dest='seven_zip', metavar='PATH',
                        help='path to the 7-Zip executable')
    parser.add_argument('--overwrite', action='store_true',
                        help='replace an existing archive instead of updating it')
    parser.add_argument('--show-command', action='store_true',
                        help='print the 7-Zip command line (password masked)')
    parser.add_argument('-i', '--interactive', action='store_true',
                        help='start the interactive menu')
    parser.add_argument('--config', default=None,
                        help='preferences file (default: ~/.7z_compressor_preferences.json)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def exit_status(returncode):
    """Process exit status for a failed 7-Zip run"""
    if returncode is None or returncode == 0:
        return 1
    if returncode < 0:
        # killed by a signal, report it the way shells do
        return 128 - returncode
    return returncode


def run_cli(args, preferences):
    level = args.level if args.level is not None else preferences.get("compression_level")
    compressor = SevenZipCompressor(
        compression_level=level,
        seven_zip_path=args.seven_zip or preferences.get("seven_zip_path"),
    )
    compressor.output_path = args.output
    compressor.overwrite = args.overwrite

    if args.password is not None:
        compressor.enable_encryption(args.password)

    missing = []
    if args.files:
        _, missing = compressor.add_files(args.files)
    if args.from_file:
        try:
            _, listed_missing = compressor.add_files_from_list(args.from_file)
        except OSError as e:
            print_error(f"Error reading file list: {e}")
            return 1
        missing.extend(listed_missing)

    interactive = args.interactive or (not args.files and not args.from_file)

    if missing and not interactive:
        for path in missing:
            print_error(f"Input file not found: {path}")
        return 1

    if args.encrypt:
        password = ask_password()
        if password is None:
            return 1
        compressor.enable_encryption(password)

    seven_zip = find_seven_zip(compressor.seven_zip_path)

    if interactive:
        if not seven_zip:
            print_error(f"7-Zip executable not found. Install 7-Zip or set {EXECUTABLE_ENV_VAR}")
            return 1
        compressor.seven_zip_path = seven_zip
        for path in missing:
            print_warning(f"File or folder not found: {path}")
        CompressorMenu(compressor, preferences,
                       overwrite=args.overwrite, show_command=args.show_command).run()
        return 0

    problems = compressor.validate()
    if problems:
        for problem in problems:
            print_error(problem)
        return 1

    if not seven_zip:
        print_error(f"7-Zip executable not found. Install 7-Zip or set {EXECUTABLE_ENV_VAR}")
        return 1

    output_path = compressor.resolve_output_path()
    if os.path.isfile(output_path) and not args.overwrite:
        print_warning(f"File already exists: {output_path}, updating it (use --overwrite to replace)")

    success, message = compressor.compress(seven_zip, show_command=args.show_command)
    if not success:
        print_error(f"Archive creation failed: {message}")
        return exit_status(compressor.last_returncode)

    show_archive_completion(compressor, message)
    return 0


def main(argv=None):
    """Entry point for command line usage"""
    parser = build_parser()
    args = parser.parse_args(argv)
    preferences = Preferences(args.config)

    try:
        return run_cli(args, preferences)
    except (KeyboardInterrupt, EOFError):
        print()
        print_warning("Operation cancelled")
        return 130


if __name__ == "__main__":
    sys.exit(main())
