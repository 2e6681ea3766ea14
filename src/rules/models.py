from pydantic import BaseModel, ConfigDict, Field


class ProjectRules(BaseModel):
    slug: str = "page-render-core"
    rules_version: str = "1"

class RawHtmlRules(BaseModel):
    base_class: str = Field(default="raw-html-block", pattern=r"^[A-Za-z_-][A-Za-z0-9_-]*$")
    instance_fallback: str = "instance"

class FormRules(BaseModel):
    required_marker: str = " *"
    # Literal label shipped on existing pages; not localized.
    submit_label: str = "提交"

class RenderRules(BaseModel):
    raw_html: RawHtmlRules = Field(default_factory=RawHtmlRules)
    forms: FormRules = Field(default_factory=FormRules)
    fragment_separator: str = "\n\n"
    disabled_kinds: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

class Rules(BaseModel):
    project: ProjectRules = Field(default_factory=ProjectRules)
    render: RenderRules = Field(default_factory=RenderRules)
