"""
Resume configuration loader.

Reads the YAML configuration file and builds the immutable ResumeData record.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vitae.contexts.templating.exceptions import ParseError
from vitae.contexts.templating.logger import log_load_failure, log_load_result, log_load_start
from vitae.contexts.templating.resume_data_structure import (
    Education,
    Experience,
    Language,
    LinkedItem,
    Personal,
    Project,
    ResumeData,
    SkillCategory,
)
from vitae.utils.settings import RESUME_CONFIG_PATH

# Scalar types YAML may hand us for fields that are displayed as text
SCALAR_TYPES = (str, int, float, bool)


def _child(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key


def _get(mapping: Dict[str, Any], *keys: str) -> Any:
    """Return the value of the first key present (keys are aliases of one field)."""
    for key in keys:
        if key in mapping:
            return mapping[key]
    return None


def _as_text(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, SCALAR_TYPES):
        return str(value)
    raise ParseError(f"Expected a text value, got {type(value).__name__}", field=where)


def _as_mapping(value: Any, where: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    raise ParseError(f"Expected a mapping, got {type(value).__name__}", field=where)


def _as_list(value: Any, where: str) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    raise ParseError(f"Expected a list, got {type(value).__name__}", field=where)


def _text_field(mapping: Dict[str, Any], where: str, *keys: str) -> str:
    return _as_text(_get(mapping, *keys), _child(where, keys[0]))


def _parse_linked_items(value: Any, where: str) -> tuple:
    """Parse a list of {name, link} entries; bare strings are accepted as names."""
    items = []
    for i, raw in enumerate(_as_list(value, where)):
        item_where = f"{where}[{i}]"
        if isinstance(raw, SCALAR_TYPES):
            items.append(LinkedItem(name=str(raw)))
            continue
        entry = _as_mapping(raw, item_where)
        items.append(
            LinkedItem(
                name=_text_field(entry, item_where, "name"),
                link=_text_field(entry, item_where, "link"),
            )
        )
    return tuple(items)


def _parse_personal(value: Any) -> Personal:
    where = "personal"
    data = _as_mapping(value, where)
    return Personal(
        name=_text_field(data, where, "name"),
        title=_text_field(data, where, "title"),
        email=_text_field(data, where, "email"),
        phone=_text_field(data, where, "phone"),
        location=_text_field(data, where, "location"),
        linkedin=_text_field(data, where, "linkedin"),
        github=_text_field(data, where, "github"),
        summary=_text_field(data, where, "summary"),
    )


def _parse_skills(value: Any) -> tuple:
    categories = []
    for i, raw in enumerate(_as_list(value, "skills")):
        where = f"skills[{i}]"
        data = _as_mapping(raw, where)
        categories.append(
            SkillCategory(
                category=_text_field(data, where, "category"),
                items=_parse_linked_items(data.get("items"), _child(where, "items")),
            )
        )
    return tuple(categories)


def _parse_experience(value: Any) -> tuple:
    entries = []
    for i, raw in enumerate(_as_list(value, "experience")):
        where = f"experience[{i}]"
        data = _as_mapping(raw, where)
        description_where = _child(where, "description")
        description = tuple(
            _as_text(line, f"{description_where}[{j}]")
            for j, line in enumerate(_as_list(data.get("description"), description_where))
        )
        entries.append(
            Experience(
                company=_text_field(data, where, "company"),
                position=_text_field(data, where, "position"),
                location=_text_field(data, where, "location"),
                start_date=_text_field(data, where, "startDate", "start_date"),
                end_date=_text_field(data, where, "endDate", "end_date"),
                description=description,
                employment_type=_text_field(data, where, "employmentType", "employment_type"),
                technologies=_parse_linked_items(
                    data.get("technologies"), _child(where, "technologies")
                ),
            )
        )
    return tuple(entries)


def _parse_education(value: Any) -> tuple:
    entries = []
    for i, raw in enumerate(_as_list(value, "education")):
        where = f"education[{i}]"
        data = _as_mapping(raw, where)
        entries.append(
            Education(
                institution=_text_field(data, where, "institution"),
                degree=_text_field(data, where, "degree"),
                location=_text_field(data, where, "location"),
                start_date=_text_field(data, where, "startDate", "start_date"),
                end_date=_text_field(data, where, "endDate", "end_date"),
            )
        )
    return tuple(entries)


def _parse_projects(value: Any) -> tuple:
    entries = []
    for i, raw in enumerate(_as_list(value, "projects")):
        where = f"projects[{i}]"
        data = _as_mapping(raw, where)
        entries.append(
            Project(
                name=_text_field(data, where, "name"),
                description=_text_field(data, where, "description"),
                technologies=_parse_linked_items(
                    data.get("technologies"), _child(where, "technologies")
                ),
                link=_text_field(data, where, "link"),
            )
        )
    return tuple(entries)


def _parse_languages(value: Any) -> tuple:
    entries = []
    for i, raw in enumerate(_as_list(value, "languages")):
        where = f"languages[{i}]"
        data = _as_mapping(raw, where)
        entries.append(
            Language(
                language=_text_field(data, where, "language"),
                proficiency=_text_field(data, where, "proficiency"),
            )
        )
    return tuple(entries)


def parse_resume_dict(data: Optional[Dict[str, Any]]) -> ResumeData:
    """
    Build a ResumeData record from plain Python containers.

    Args:
        data: Mapping with the top-level resume keys (None is treated as empty)

    Returns:
        ResumeData instance

    Raises:
        ParseError: If a section does not have the expected shape
    """
    data = _as_mapping(data, "")
    return ResumeData(
        personal=_parse_personal(data.get("personal")),
        skills=_parse_skills(data.get("skills")),
        experience=_parse_experience(data.get("experience")),
        education=_parse_education(data.get("education")),
        projects=_parse_projects(data.get("projects")),
        languages=_parse_languages(data.get("languages")),
    )


def _read_yaml(config_path: Path) -> Any:
    """Read a YAML file into plain containers with OmegaConf."""
    try:
        conf = OmegaConf.load(config_path)
        # "${...}" in resume text is literal, never an interpolation
        return OmegaConf.to_container(conf, resolve=False)
    except FileNotFoundError:
        raise ParseError("Config file not found", path=config_path) from None
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Error reading config file: {e}", path=config_path) from e
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise ParseError(f"Error parsing config file: {e}", path=config_path) from e


def load_resume(config_path: Path = RESUME_CONFIG_PATH) -> ResumeData:
    """
    Load resume data from a YAML configuration file.

    Args:
        config_path: Path to the YAML file (defaults to RESUME_CONFIG_PATH)

    Returns:
        Immutable ResumeData record

    Raises:
        ParseError: If the file is missing, unreadable, malformed, or does not
                    match the resume schema

    Example:
        from vitae.contexts.templating import load_resume

        resume = load_resume(Path("config.yaml"))
        print(resume.personal.name)
    """
    config_path = Path(config_path)
    log_load_start(config_path)

    try:
        raw = _read_yaml(config_path)
        if raw is not None and not isinstance(raw, dict):
            raise ParseError(
                f"Top level must be a mapping, got {type(raw).__name__}", path=config_path
            )
        try:
            resume = parse_resume_dict(raw)
        except ParseError as e:
            raise ParseError(e.message, path=config_path, field=e.field) from e
    except ParseError as e:
        log_load_failure(config_path, e)
        raise

    log_load_result(config_path, resume)
    return resume
