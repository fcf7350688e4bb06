"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py) and the
wizard session functions. Every document command requires a logged-in
session.
"""

from __future__ import annotations

import logging
import shutil
from datetime import date
from pathlib import Path
from typing import Annotated, Callable, Optional, Sequence

import typer

from court_docs.presentation.cli.formatters import (
    choices_table,
    console,
    error_message,
    export_table,
    json_panel,
    step_header,
    success_panel,
)

app = typer.Typer(
    name="court-docs",
    help="⚖️  Court documents generator — witness statements, skeleton arguments, "
    "position statements and draft orders (.docx / .pdf)",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for auth commands
auth_app = typer.Typer(
    name="auth",
    help="🔐 Register, log in and log out",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(auth_app, name="auth")

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage the layout configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON configuration file"),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Court documents generator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _container(config: Optional[str] = None):
    from court_docs.bootstrap import Container
    from court_docs.domain.errors import ConfigurationError

    try:
        return Container(config_path=config)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)


def _require_session(container) -> None:
    identity = container.auth_service().current_session()
    if identity is None:
        error_message("Please log in first: court-docs auth login")
        raise typer.Exit(code=1)
    console.print(f"[dim]Signed in as {identity.email}[/]")


def _parse_date(raw: Optional[str]) -> Optional[date]:
    if not raw:
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        error_message(f"Invalid date '{raw}'. Use YYYY-MM-DD.")
        raise typer.Exit(code=1)


def _parse_formats(fmt: str):
    from court_docs.domain.models.enums import OutputFormat

    if fmt.lower() == "all":
        return list(OutputFormat)
    try:
        return [OutputFormat(fmt.lower())]
    except ValueError:
        error_message(f"Unknown format '{fmt}'. Use docx, pdf or all.")
        raise typer.Exit(code=1)


def _export_all(container, case, document, output_dir: Path, formats, signoff, on: date) -> list:
    from court_docs.domain.errors import DocumentGenerationError

    results = []
    for out_format in formats:
        uc = container.export_document(out_format)
        try:
            results.append(uc.execute(case, document, output_dir, on=on, signoff=signoff))
        except DocumentGenerationError as e:
            error_message(str(e))
            raise typer.Exit(code=1)
    return results


# ---------------------------------------------------------------------------
# court-docs preview
# ---------------------------------------------------------------------------


@app.command()
def preview(
    case_file: Annotated[str, typer.Argument(help="JSON case file")],
    output: Annotated[
        Optional[str], typer.Option("--output", "-o", help="HTML file to write")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Render a case file as an HTML preview."""
    from court_docs.application.case_file import load_case_file
    from court_docs.domain.errors import CaseValidationError

    container = _container(config)
    _require_session(container)

    source = Path(case_file)
    try:
        cf = load_case_file(source)
    except CaseValidationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    html = container.preview_document(standalone=True).execute(cf.case, cf.document, cf.signoff)
    out_path = Path(output) if output else source.with_suffix(".html")
    out_path.write_text(html, encoding="utf-8")

    success_panel(f"✅ Preview written: [bold green]{out_path}[/]", title="👁  Preview")


# ---------------------------------------------------------------------------
# court-docs export
# ---------------------------------------------------------------------------


@app.command()
def export(
    case_file: Annotated[str, typer.Argument(help="JSON case file")],
    fmt: Annotated[
        str, typer.Option("--format", "-f", help="docx, pdf or all")
    ] = "all",
    output_dir: Annotated[
        str, typer.Option("--output-dir", "-o", help="Directory for the exported files")
    ] = ".",
    prepared_by: Annotated[
        Optional[str], typer.Option("--prepared-by", help="Name shown in the footer")
    ] = None,
    on: Annotated[
        Optional[str], typer.Option("--date", help="Document date (YYYY-MM-DD), default today")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Export a case file as Word and/or PDF."""
    from court_docs.application.case_file import load_case_file
    from court_docs.domain.errors import CaseValidationError
    from court_docs.domain.models.content import SignOff

    formats = _parse_formats(fmt)
    container = _container(config)
    _require_session(container)

    try:
        cf = load_case_file(Path(case_file))
    except CaseValidationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    doc_date = _parse_date(on) or (cf.signoff.document_date if cf.signoff else date.today())
    if prepared_by is None:
        prepared_by = cf.signoff.prepared_by if cf.signoff else container.config.document.prepared_by
    signoff = SignOff(prepared_by=prepared_by, document_date=doc_date)

    results = _export_all(container, cf.case, cf.document, Path(output_dir), formats, signoff, doc_date)
    export_table(results)


# ---------------------------------------------------------------------------
# court-docs wizard
# ---------------------------------------------------------------------------


def _retry(step: Callable):
    """Run a wizard step until it stops raising ``CaseValidationError``."""
    from court_docs.domain.errors import CaseValidationError

    while True:
        try:
            return step()
        except CaseValidationError as e:
            error_message(str(e))


def _choose(title: str, options: Sequence[str], default: int = 1) -> str:
    choices_table(title, options)
    while True:
        index = typer.prompt("Choice", default=default, type=int)
        if 1 <= index <= len(options):
            return options[index - 1]
        error_message(f"Choose a number between 1 and {len(options)}")


def _ask(label: str, default: str = "") -> str:
    return typer.prompt(label, default=default, show_default=bool(default))


def _ask_date(label: str) -> Optional[date]:
    while True:
        raw = _ask(f"{label} (YYYY-MM-DD, blank to skip)")
        if not raw.strip():
            return None
        try:
            return date.fromisoformat(raw.strip())
        except ValueError:
            error_message("Please enter a date as YYYY-MM-DD")


def _ask_many(label: str) -> str:
    """Collect entries until a blank one; entries become separate paragraphs."""
    console.print(f"[bold]{label}[/] [dim](one entry per prompt, blank to finish)[/]")
    entries = []
    while True:
        entry = _ask(f"  {len(entries) + 1}")
        if not entry.strip():
            return "\n\n".join(entries)
        entries.append(entry)


def _ask_parties():
    from court_docs.application.session import PartyEntry
    from court_docs.domain.rules.constants import (
        FIRST_PARTY_DESIGNATIONS,
        LITIGATION_FRIEND_PREFIXES,
        OTHER_PARTY_DESIGNATIONS,
    )

    console.print("[bold]Parties[/] [dim](blank name to finish)[/]")
    parties = []
    while True:
        name = _ask(f"Party {len(parties) + 1} name")
        if not name.strip():
            return parties
        suggested = FIRST_PARTY_DESIGNATIONS[0] if not parties else OTHER_PARTY_DESIGNATIONS[0]
        designation = _ask("  Designation", default=suggested)
        entry = PartyEntry(name=name, designation=designation)
        if typer.confirm("  Has a litigation friend?", default=False):
            entry = entry.model_copy(
                update={
                    "has_litigation_friend": True,
                    "litigation_friend_role": _choose("Role", LITIGATION_FRIEND_PREFIXES),
                    "litigation_friend_name": _ask("  Name of litigation friend"),
                }
            )
        parties.append(entry)


def _wizard_case_details(session):
    from court_docs.application import session as steps
    from court_docs.domain.models.enums import ProceedingStyle

    case_number = _ask("Case number")
    court = _ask_many("Court name lines").replace("\n\n", "\n")
    matter_of_statute = _ask("In the matter of (statute)")
    matter_of_person = _ask("In the matter of (person)")
    adversarial = typer.confirm("Adversarial proceedings (- v -)?", default=False)
    parties = _ask_parties()
    return steps.collect_case_details(
        session,
        case_number=case_number,
        parties=parties,
        court=court,
        matter_of_statute=matter_of_statute,
        matter_of_person=matter_of_person,
        proceeding_style=ProceedingStyle.ADVERSARIAL if adversarial else ProceedingStyle.NON_ADVERSARIAL,
    )


def _wizard_exhibits(session, witness_name: str, exhibit_types: Sequence[str]):
    from court_docs.application import session as steps
    from court_docs.domain.rules.constants import OTHER_EXHIBIT_TYPE

    while typer.confirm("Add an exhibit?", default=False):

        def add(current=session):
            exhibit_type = _choose("Exhibit type", exhibit_types)
            custom = _ask("  Custom type") if exhibit_type == OTHER_EXHIBIT_TYPE else ""
            return steps.add_exhibit(
                current,
                witness_name=witness_name,
                exhibit_type=exhibit_type,
                custom_type=custom,
                description=_ask("  Description"),
                dated=_ask_date("  Dated"),
            )

        session = _retry(add)
        console.print(f"  [green]Exhibit {session.exhibits[-1].mark} added[/]")
    return session


def _wizard_witness_statement(session, exhibit_types: Sequence[str]):
    from court_docs.application import session as steps
    from court_docs.domain.formatting import witness_initials
    from court_docs.domain.models.enums import WritingMode
    from court_docs.domain.rules.constants import STATEMENT_ORDINALS

    witness_name = _ask("Witness name")
    witness_role = _ask("Witness role")
    witness_address = _ask("Witness address")
    ordinal = _choose("Statement", STATEMENT_ORDINALS)
    mark = _ask("Exhibit mark", default=witness_initials(witness_name))
    introduction = _ask_many("Introduction")

    free_text = ""
    if typer.confirm("Write numbered paragraphs one at a time?", default=True):
        session = steps.set_writing_mode(session, WritingMode.STRUCTURED)
        console.print("[bold]Statement paragraphs[/] [dim](blank to finish)[/]")
        while True:
            text = _ask(f"  {len(session.paragraphs) + 1}")
            if not text.strip():
                break
            session = steps.add_paragraph(session, text)
    else:
        session = steps.set_writing_mode(session, WritingMode.FREE)
        free_text = _ask_many("Statement")

    session = _wizard_exhibits(session, witness_name, exhibit_types)
    return steps.collect_witness_statement(
        session,
        witness_name=witness_name,
        witness_role=witness_role,
        witness_address=witness_address,
        statement_ordinal=ordinal,
        exhibit_mark=mark,
        introduction=introduction,
        free_text=free_text,
    )


def _wizard_skeleton_argument(session, _exhibit_types):
    from court_docs.application import session as steps

    return steps.collect_skeleton_argument(
        session,
        hearing_date=_ask_date("Hearing date"),
        hearing_type=_ask("Hearing type"),
        time_estimate=_ask("Time estimate"),
        introduction=_ask_many("Introduction"),
        issues=_ask_many("Issues"),
        law=_ask_many("Legal framework"),
        application=_ask_many("Application of law to facts"),
        relief=_ask_many("Relief sought"),
        authorities=_ask_many("Authorities"),
    )


def _wizard_position_statement(session, _exhibit_types):
    from court_docs.application import session as steps

    return steps.collect_position_statement(
        session,
        hearing_date=_ask_date("Hearing date"),
        on_behalf_of=_ask("On behalf of"),
        introduction=_ask_many("Introduction"),
        current_position=_ask_many("Current position"),
        orders_sought=_ask_many("Orders sought"),
        outstanding=_ask_many("Outstanding issues"),
    )


def _wizard_draft_order(session, _exhibit_types):
    from court_docs.application import session as steps
    from court_docs.domain.rules.constants import ORDER_TYPES

    return steps.collect_draft_order(
        session,
        order_type=_choose("Order type", ORDER_TYPES),
        judge_name=_ask("Before (judge)"),
        recitals=_ask_many("Recitals"),
        provisions=_ask_many("Provisions"),
        service_provisions=_ask_many("Service"),
        costs_provisions=_ask_many("Costs"),
    )


@app.command()
def wizard(
    fmt: Annotated[
        str, typer.Option("--format", "-f", help="docx, pdf or all")
    ] = "all",
    output_dir: Annotated[
        str, typer.Option("--output-dir", "-o", help="Directory for the preview and exports")
    ] = ".",
    config: ConfigOption = None,
) -> None:
    """Prepare a document step by step, then write the preview and exports."""
    from court_docs.application import session as steps
    from court_docs.domain.models.content import SignOff
    from court_docs.domain.models.enums import DocumentType
    from court_docs.domain.rules.constants import DOCUMENT_LABELS

    formats = _parse_formats(fmt)
    container = _container(config)
    _require_session(container)
    exhibit_types = container.config.document.exhibit_types

    content_steps = {
        DocumentType.WITNESS_STATEMENT: _wizard_witness_statement,
        DocumentType.SKELETON_ARGUMENT: _wizard_skeleton_argument,
        DocumentType.POSITION_STATEMENT: _wizard_position_statement,
        DocumentType.DRAFT_ORDER: _wizard_draft_order,
    }

    session = steps.reset()

    step_header(1, "Document type")
    labels = [DOCUMENT_LABELS[t] for t in DocumentType]
    label = _choose("Document type", labels)
    session = steps.select_document_type(session, list(DocumentType)[labels.index(label)])

    step_header(2, "Case details")
    session = _retry(lambda: _wizard_case_details(session))

    step_header(3, DOCUMENT_LABELS[session.document_type])
    collect = content_steps[session.document_type]
    session = _retry(lambda: collect(session, exhibit_types))

    step_header(4, "Preview & export")
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    html = container.preview_document(standalone=True).execute(session.case, session.content)
    preview_path = out_dir / "preview.html"
    preview_path.write_text(html, encoding="utf-8")
    console.print(f"Preview written: [cyan]{preview_path}[/]")

    today = date.today()
    signoff = SignOff(
        prepared_by=_ask("Prepared by", default=container.config.document.prepared_by),
        document_date=today,
    )
    results = _export_all(container, session.case, session.content, out_dir, formats, signoff, today)
    export_table(results)


# ---------------------------------------------------------------------------
# court-docs auth register / login / logout / whoami
# ---------------------------------------------------------------------------


def _report(result, success: str) -> None:
    if not result.success:
        error_message(result.message)
        raise typer.Exit(code=1)
    success_panel(success, title="🔐 Auth")


@auth_app.command("register")
def auth_register(
    email: Annotated[str, typer.Option("--email", "-e", prompt=True, help="Email address")],
    password: Annotated[str, typer.Option(prompt=True, hide_input=True, help="Password")],
    confirm: Annotated[
        str,
        typer.Option(prompt="Confirm password", hide_input=True, help="Repeat the password"),
    ],
) -> None:
    """Create an account and log in."""
    service = _container().auth_service()
    _report(service.register(email, password, confirm), f"✅ Registered and logged in as [bold]{email}[/]")


@auth_app.command("login")
def auth_login(
    email: Annotated[str, typer.Option("--email", "-e", prompt=True, help="Email address")],
    password: Annotated[str, typer.Option(prompt=True, hide_input=True, help="Password")],
) -> None:
    """Log in with an existing account."""
    service = _container().auth_service()
    _report(service.login(email, password), f"✅ Logged in as [bold]{email}[/]")


@auth_app.command("logout")
def auth_logout() -> None:
    """End the current session."""
    service = _container().auth_service()
    _report(service.logout(), "👋 Logged out")


@auth_app.command("whoami")
def auth_whoami() -> None:
    """Show the logged-in account."""
    identity = _container().auth_service().current_session()
    if identity is None:
        console.print("[yellow]Not logged in[/]")
        raise typer.Exit(code=1)
    console.print(f"Logged in as [bold green]{identity.email}[/]")


# ---------------------------------------------------------------------------
# court-docs config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active configuration (formatted)."""
    json_panel(_container(config).config.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "court_docs_config.json",
) -> None:
    """Copy the default configuration to the current directory for customization."""
    from court_docs.config.loader import default_config_path

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(default_config_path(), dest)
    success_panel(
        f"✅ Configuration copied to: [bold green]{dest}[/]\n\n"
        "Edit this file and use it with [bold]--config[/]:\n"
        f'  court-docs export case.json --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[
        str, typer.Argument(help="Path to the JSON configuration file to validate")
    ],
) -> None:
    """Validate a JSON configuration file."""
    from court_docs.config import load_config

    path = Path(config_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = load_config(path)
    except Exception as e:
        console.print(f"[bold red]❌ Validation error:[/]\n\n{e}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Paper: [cyan]{cfg.page.paper}[/]\n"
        f"  Word font: [cyan]{cfg.typography.font_name} {cfg.typography.font_size_pt}pt[/]\n"
        f"  PDF font: [cyan]{cfg.pdf.font_family} {cfg.pdf.font_size_pt}pt[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
