import os
from jinja2 import Environment, FileSystemLoader, select_autoescape

BASE_DIR = os.path.dirname(__file__)
env = Environment(
    loader=FileSystemLoader(BASE_DIR),
    autoescape=select_autoescape(["html"]),
)


def load_template(name):
    return env.get_template(name)


def render_registration_form(submission=None):
    template = load_template("index.html")
    return template.render(
        identifier=submission.identifier if submission else "",
        inline_error=submission.inline_error if submission else None,
    )


def render_result_page(view):
    template = load_template("result.html")
    return template.render(view=view)
