from __future__ import annotations

import argparse
import sys
import tempfile
from pathlib import Path
from typing import Optional, Sequence

if __package__ in {None, ""}:
    # Allow running via ``python people_app/gradio_app.py`` by adding repo root to sys.path
    sys.path.append(str(Path(__file__).resolve().parents[1]))

import gradio as gr
import pandas as pd

from people_app.core.config import AppConfig
from people_app.core.export import export_people_csv
from people_app.gradio_controller import TABLE_HEADERS, GradioPeopleController
from people_app.main import add_common_arguments, build_config, configure_logging


def people_frame(controller: Optional[GradioPeopleController]) -> pd.DataFrame:
    rows = controller.rows() if controller is not None else []
    return pd.DataFrame(rows, columns=TABLE_HEADERS)


def append_log(log: str, message: str, max_lines: int = 200) -> str:
    lines = [line for line in (log or "").splitlines() if line.strip()]
    lines.append(message)
    if len(lines) > max_lines:
        lines = lines[-max_lines:]
    return "\n".join(lines)


def _show_log(log: str) -> str:
    return log


def selector_update(controller: GradioPeopleController, value: Optional[str] = None):
    choices = controller.choices()
    if value is not None and value not in {uuid for _, uuid in choices}:
        value = None
    return gr.update(choices=choices, value=value)


def init_controller():
    controller = GradioPeopleController()
    log = append_log("", "Started with an empty list.")
    return controller, people_frame(controller), selector_update(controller), log


def add_person(controller: GradioPeopleController, name: str, age_text: str, log: str):
    person, message = controller.add(name, age_text)
    log = append_log(log, message)
    if person is None:
        return people_frame(controller), gr.update(), gr.update(), gr.update(), log, message
    return people_frame(controller), selector_update(controller), "", "", log, message


def update_person(controller: GradioPeopleController, selected: Optional[str], name: str, age_text: str, log: str):
    _, message = controller.update(selected, name, age_text)
    log = append_log(log, message)
    return people_frame(controller), selector_update(controller, selected), log, message


def remove_person(controller: GradioPeopleController, selected: Optional[str], log: str):
    _, message = controller.remove(selected)
    log = append_log(log, message)
    return people_frame(controller), selector_update(controller), "", "", log, message


def load_selected(controller: GradioPeopleController, selected: Optional[str]):
    person = controller.find(selected)
    if person is None:
        return "", ""
    return person.name, str(person.age)


def download_people(controller: GradioPeopleController):
    if controller is None or not controller.store.count():
        return None, "No people to export."
    with tempfile.NamedTemporaryFile(mode="w", suffix=".csv", delete=False) as fp:
        path = Path(fp.name)
    rows = export_people_csv(controller.store.all(), path)
    return str(path), f"Exported {rows} rows."


def build_demo(config: AppConfig | None = None) -> gr.Blocks:
    config = config or AppConfig()

    with gr.Blocks(title=config.window.title) as demo:
        gr.Markdown(f"## {config.window.title}")
        controller_state = gr.State()
        log_state = gr.State("")

        with gr.Row():
            with gr.Column(scale=2):
                people_table = gr.Dataframe(
                    headers=TABLE_HEADERS,
                    label="People",
                    interactive=False,
                    row_count=(0, "dynamic"),
                    col_count=(len(TABLE_HEADERS), "fixed"),
                )
                with gr.Row():
                    export_btn = gr.Button("Export CSV")
                    export_file = gr.File(label="CSV download")

            with gr.Column(scale=1):
                gr.Markdown(f"### {config.dialog.title}")
                name_box = gr.Textbox(label="Name", placeholder=config.dialog.name_placeholder)
                age_box = gr.Textbox(label="Age", placeholder=config.dialog.age_placeholder)
                add_btn = gr.Button(config.dialog.confirm_label, variant="primary")

                gr.Markdown("### Edit")
                selector = gr.Dropdown(label="Person", choices=[])
                with gr.Row():
                    update_btn = gr.Button("Update")
                    remove_btn = gr.Button("Remove")

                status_message = gr.Markdown("")
                log_box = gr.Textbox(lines=8, label="Log", interactive=False)

        add_btn.click(
            fn=add_person,
            inputs=[controller_state, name_box, age_box, log_state],
            outputs=[people_table, selector, name_box, age_box, log_state, status_message],
        ).then(fn=_show_log, inputs=[log_state], outputs=[log_box])

        update_btn.click(
            fn=update_person,
            inputs=[controller_state, selector, name_box, age_box, log_state],
            outputs=[people_table, selector, log_state, status_message],
        ).then(fn=_show_log, inputs=[log_state], outputs=[log_box])

        remove_btn.click(
            fn=remove_person,
            inputs=[controller_state, selector, log_state],
            outputs=[people_table, selector, name_box, age_box, log_state, status_message],
        ).then(fn=_show_log, inputs=[log_state], outputs=[log_box])

        selector.change(
            fn=load_selected,
            inputs=[controller_state, selector],
            outputs=[name_box, age_box],
        )

        export_btn.click(
            fn=download_people,
            inputs=[controller_state],
            outputs=[export_file, status_message],
        )

        demo.load(
            fn=init_controller,
            inputs=[],
            outputs=[controller_state, people_table, selector, log_state],
        ).then(fn=_show_log, inputs=[log_state], outputs=[log_box])

    return demo


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="People list web UI")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(list(argv if argv is not None else sys.argv[1:]))
    configure_logging(args.log_level)
    config = build_config(args)
    demo = build_demo(config)
    demo.launch(server_name=config.web.server_name, server_port=config.web.server_port)


if __name__ == "__main__":
    main()
