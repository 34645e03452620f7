from functools import reduce
from pathlib import Path
from tempfile import gettempdir
from typing import Any, Self

from appdirs import user_config_dir
from pydantic import BaseModel, Field

from .. import app_name
from ..models import LanguageKind, SplitDirection
from ..utils import config_dirs_hierarchy, load_all_yamls

settings_filename = f"{app_name}.yml"


def _default_grammars() -> dict[LanguageKind, tuple[str, ...]]:
    return {
        LanguageKind.C: ("c", "h"),
        LanguageKind.Cpp: (
            "cc",
            "cpp",
            "cp",
            "cxx",
            "c++",
            "cu",
            "cuh",
            "hh",
            "hpp",
            "hxx",
            "h++",
            "inl",
            "ino",
            "ipp",
            "tcc",
            "tpp",
            "C",
        ),
    }


class Settings(BaseModel):
    add_compiling_error: bool = Field(
        default=True,
        description="Write a compiling_error.txt file if compiling goes wrong",
    )
    split_direction: SplitDirection = Field(
        default=SplitDirection.Down,
        description="Split direction used when opening compiling_error.txt",
    )
    debug: bool = Field(default=False, description="Log function calls")
    c_compiler_options: str = Field(
        default="", description="C compiler command line options"
    )
    cpp_compiler_options: str = Field(
        default="", description="C++ compiler command line options"
    )
    run_after_compile: bool = Field(
        default=True, description="Run the program after compiling is done"
    )
    show_warnings: bool = Field(default=True, description="Show compile warnings")
    c_compiler: str = Field(
        default="gcc", description="Path or name of the C compiler executable"
    )
    cpp_compiler: str = Field(
        default="g++", description="Path or name of the C++ compiler executable"
    )
    compile_to_tmp_directory: bool = Field(
        default=True,
        description="Compile to a temporary directory instead of the source directory",
    )
    close_error_tab_on_success: bool = Field(
        default=True,
        description="Close the error tab and switch to the compiled file on success",
    )
    show_error_notifications: bool = Field(
        default=False, description="Show error notifications for compilation errors"
    )
    linux_terminal: str = Field(
        default="XTerm", description="Terminal emulator used to run programs"
    )
    grammars: dict[LanguageKind, tuple[str, ...]] = Field(
        default_factory=_default_grammars,
        description="File extensions (without the dot) known for each language",
    )

    def compiler_for(self, language: LanguageKind) -> str:
        match language:
            case LanguageKind.C:
                return self.c_compiler
            case LanguageKind.Cpp:
                return self.cpp_compiler

    def compiler_options_for(self, language: LanguageKind) -> str:
        match language:
            case LanguageKind.C:
                return self.c_compiler_options
            case LanguageKind.Cpp:
                return self.cpp_compiler_options

    def compiled_path(self, directory: Path, name: str) -> Path:
        if self.compile_to_tmp_directory:
            return Path(gettempdir()) / name
        return directory / name

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        resolved_path = path.resolve()
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **(b or {})},
            load_all_yamls(
                d / settings_filename
                for d in config_dirs_hierarchy(
                    Path(user_config_dir(app_name)), resolved_path
                )
            ),
            {},
        )
        return cls.model_validate(content)
