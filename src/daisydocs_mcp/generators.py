"""
Markup generators.

Compact daisyUI skeletons for common page layouts plus small snippet
helpers (theme, form, table, chart, script). User-supplied text is
HTML-escaped before it is placed into markup.
"""

from collections.abc import Callable, Iterable
from html import escape

DEFAULT_LAYOUT = "saas"
DEFAULT_TITLE = "My App"
IDEA_TITLE = "Generated UI"


def _navbar(title: str) -> str:
    return (
        '<div class="navbar bg-base-100 border-b border-base-200">'
        f'<div class="flex-1"><a class="btn btn-ghost text-xl font-bold">{title}</a></div>'
        '<div class="flex-none"><button class="btn btn-primary">Get Started</button></div>'
        "</div>"
    )


def _saas(title: str) -> str:
    return f"""<div class="min-h-screen bg-base-100">
  {_navbar(title)}
  <div class="hero min-h-[70vh] bg-base-200">
    <div class="hero-content text-center">
      <div class="max-w-2xl">
        <h1 class="text-5xl font-extrabold">{title}</h1>
        <p class="py-6 text-xl">Ship faster with a modern component library.</p>
        <button class="btn btn-primary btn-lg">Start Free Trial</button>
      </div>
    </div>
  </div>
  <div class="grid grid-cols-1 md:grid-cols-3 gap-8 p-12">
    <div class="card bg-base-200"><div class="card-body"><h3 class="card-title">Fast</h3></div></div>
    <div class="card bg-base-200"><div class="card-body"><h3 class="card-title">Secure</h3></div></div>
    <div class="card bg-base-200"><div class="card-body"><h3 class="card-title">Themable</h3></div></div>
  </div>
  <footer class="footer p-10 bg-base-300"><nav><h6 class="footer-title">Company</h6><a class="link link-hover">About</a></nav></footer>
</div>"""


def _blog(title: str) -> str:
    return f"""<div class="min-h-screen bg-base-100">
  {_navbar(title)}
  <div class="container mx-auto px-4 py-12 flex flex-col lg:flex-row gap-12">
    <main class="lg:w-2/3">
      <h2 class="text-2xl font-bold mb-6">Latest Stories</h2>
      <article class="card bg-base-200 mb-6"><div class="card-body"><div class="badge badge-ghost">Tech</div><h3 class="card-title">First post</h3></div></article>
    </main>
    <aside class="lg:w-1/3">
      <div class="card bg-base-200 p-6"><h3 class="font-bold">Newsletter</h3>
        <div class="join"><input class="input join-item" placeholder="Email"/><button class="btn btn-primary join-item">Subscribe</button></div>
      </div>
    </aside>
  </div>
</div>"""


def _social(title: str) -> str:
    return f"""<div class="min-h-screen bg-base-100 flex justify-center">
  <aside class="w-64 hidden lg:block p-4"><div class="text-2xl font-bold text-primary mb-4">{title}</div>
    <ul class="menu w-full"><li><a class="menu-active">Home</a></li><li><a>Messages</a></li><li><a>Profile</a></li></ul>
  </aside>
  <main class="w-full lg:w-[600px] border-x border-base-200">
    <div class="p-4 border-b border-base-200 flex gap-4"><textarea class="textarea w-full" placeholder="What is happening?"></textarea><button class="btn btn-primary">Post</button></div>
    <div class="chat chat-start p-4"><div class="chat-bubble">Hello world</div></div>
  </main>
</div>"""


def _kanban(title: str) -> str:
    lanes = "".join(
        f'<div class="w-80 shrink-0 flex flex-col gap-3"><h3 class="font-bold uppercase text-sm">{lane}</h3>'
        '<div class="card bg-base-100 shadow-sm p-4">Task</div>'
        '<button class="btn btn-ghost btn-block">+ Add Task</button></div>'
        for lane in ("To Do", "In Progress", "Done")
    )
    return f"""<div class="h-screen flex flex-col bg-base-200">
  <div class="navbar bg-base-100 shadow-sm px-4"><h1 class="flex-1 text-xl font-bold">{title}</h1></div>
  <div class="flex-1 overflow-x-auto p-6"><div class="flex gap-6 h-full">{lanes}</div></div>
</div>"""


def _inbox(title: str) -> str:
    return f"""<div class="h-screen flex bg-base-100">
  <aside class="w-64 bg-base-200 p-4"><h1 class="text-xl font-bold mb-4">{title}</h1>
    <button class="btn btn-primary btn-block mb-4">Compose</button>
    <ul class="menu"><li><a class="menu-active">Inbox <span class="badge badge-sm">4</span></a></li><li><a>Sent</a></li></ul>
  </aside>
  <section class="w-96 border-r border-base-200"><ul class="list"><li class="list-row">Welcome aboard</li></ul></section>
  <main class="flex-1 p-6"><h2 class="text-2xl font-bold">Select a message</h2></main>
</div>"""


def _profile(title: str) -> str:
    return f"""<div class="min-h-screen bg-base-200 p-8">
  <div class="max-w-3xl mx-auto card bg-base-100 shadow-sm"><div class="card-body">
    <h1 class="card-title text-2xl">{title}</h1>
    <div role="tablist" class="tabs tabs-border"><a role="tab" class="tab tab-active">Profile</a><a role="tab" class="tab">Account</a></div>
    <fieldset class="fieldset"><legend class="fieldset-legend">Display name</legend><input class="input" /></fieldset>
    <label class="label"><input type="checkbox" class="toggle" /> Email notifications</label>
    <div class="card-actions justify-end"><button class="btn btn-primary">Save</button></div>
  </div></div>
</div>"""


def _docs(title: str) -> str:
    return f"""<div class="drawer lg:drawer-open">
  <input id="docs-drawer" type="checkbox" class="drawer-toggle" />
  <div class="drawer-content p-8 prose max-w-none"><h1>{title}</h1><p>Introduction</p><div class="mockup-code"><pre><code>npm i -D daisyui</code></pre></div></div>
  <div class="drawer-side"><label for="docs-drawer" class="drawer-overlay"></label>
    <ul class="menu bg-base-200 min-h-full w-72 p-4"><li class="menu-title">Getting Started</li><li><a>Install</a></li><li><a>Config</a></li></ul>
  </div>
</div>"""


def _dashboard(title: str) -> str:
    return f"""<div class="drawer lg:drawer-open">
  <input id="my-drawer" type="checkbox" class="drawer-toggle" />
  <div class="drawer-content flex flex-col">
    <div class="navbar bg-base-300"><label for="my-drawer" class="btn btn-square btn-ghost lg:hidden">&#9776;</label><div class="flex-1 px-2 text-xl font-bold">{title}</div></div>
    <div class="p-6"><div class="stats shadow"><div class="stat"><div class="stat-title">Users</div><div class="stat-value">1,200</div></div></div></div>
  </div>
  <div class="drawer-side"><label for="my-drawer" class="drawer-overlay"></label>
    <ul class="menu p-4 w-80 min-h-full bg-base-200"><li class="menu-title">Menu</li><li><a>Overview</a></li></ul>
  </div>
</div>"""


def _auth(title: str) -> str:
    return f"""<div class="hero min-h-screen bg-base-200">
  <div class="card w-full max-w-sm shadow-2xl bg-base-100"><form class="card-body">
    <h1 class="text-2xl font-bold">{title}</h1>
    <fieldset class="fieldset"><label class="label">Email</label><input type="email" class="input" required />
      <label class="label">Password</label><input type="password" class="input" required /></fieldset>
    <button class="btn btn-primary mt-4">Login</button>
  </form></div>
</div>"""


def _store(title: str) -> str:
    return f"""<div class="min-h-screen bg-base-100">
  {_navbar(title)}
  <div class="grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-4 gap-6 p-8">
    <div class="card bg-base-200"><div class="card-body"><h2 class="card-title">Product</h2><p>$29</p>
      <div class="card-actions justify-end"><button class="btn btn-primary">Add to cart</button></div></div></div>
  </div>
</div>"""


LAYOUTS: dict[str, Callable[[str], str]] = {
    "saas": _saas,
    "blog": _blog,
    "social": _social,
    "kanban": _kanban,
    "inbox": _inbox,
    "profile": _profile,
    "docs": _docs,
    "dashboard": _dashboard,
    "auth": _auth,
    "store": _store,
}

# Checked in order; first layout with a matching keyword wins.
IDEA_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("blog", ("blog", "article", "news")),
    ("social", ("social", "twitter", "feed")),
    ("kanban", ("kanban", "trello", "board", "task")),
    ("inbox", ("mail", "inbox", "message")),
    ("profile", ("profile", "settings", "account")),
    ("docs", ("docs", "documentation", "wiki")),
    ("saas", ("saas", "startup", "landing")),
    ("dashboard", ("dashboard", "admin")),
)


def list_layouts() -> list[str]:
    return list(LAYOUTS)


def generate_layout(layout: str, title: str = DEFAULT_TITLE) -> str:
    """Render a layout skeleton; unknown layout names fall back to saas."""
    render = LAYOUTS.get(layout.strip().lower(), LAYOUTS[DEFAULT_LAYOUT])
    return render(escape(title or DEFAULT_TITLE))


def idea_to_layout(prompt: str) -> str:
    """Pick the layout whose keywords appear in a free-text prompt.

    Example:
        >>> idea_to_layout("A kanban board for my team")
        'kanban'
    """
    text = prompt.lower()
    for layout, keywords in IDEA_KEYWORDS:
        if any(word in text for word in keywords):
            return layout
    return DEFAULT_LAYOUT


def idea_to_ui(prompt: str) -> str:
    return generate_layout(idea_to_layout(prompt), IDEA_TITLE)


def generate_theme(
    name: str,
    primary: str = "#570df8",
    secondary: str = "#f000b8",
    accent: str = "#1dcdbc",
    base: str = "#ffffff",
) -> str:
    """Render a daisyUI 5 custom theme plugin block."""
    return (
        '@plugin "daisyui/theme" {\n'
        f'  name: "{name}";\n'
        f"  --color-primary: {primary};\n"
        f"  --color-secondary: {secondary};\n"
        f"  --color-accent: {accent};\n"
        f"  --color-base-100: {base};\n"
        "}"
    )


def scaffold_form(title: str, fields: Iterable[str | dict] = ()) -> str:
    """Render a form card with one text input per field.

    Fields are names, or objects with ``name`` and optional ``type`` and
    ``label``.
    """
    rows = []
    for field in fields:
        spec = field if isinstance(field, dict) else {"name": field}
        name = escape(str(spec.get("name") or "unnamed"))
        label = escape(str(spec.get("label") or name))
        input_type = escape(str(spec.get("type") or "text"))
        rows.append(
            f'<label class="label">{label}</label>'
            f'<input type="{input_type}" name="{name}" class="input w-full" />'
        )
    return (
        '<div class="card bg-base-100 w-full max-w-sm shadow-2xl"><form class="card-body">'
        f'<h2 class="card-title justify-center">{escape(title)}</h2>'
        f'<fieldset class="fieldset">{"".join(rows)}</fieldset>'
        '<button class="btn btn-primary mt-4">Submit</button></form></div>'
    )


def create_table(columns: Iterable[str]) -> str:
    columns = [escape(str(c)) for c in columns]
    headers = "".join(f"<th>{c}</th>" for c in columns)
    cells = "".join("<td>Data</td>" for _ in columns) or "<td>Data</td>"
    return (
        '<div class="overflow-x-auto"><table class="table table-zebra w-full">'
        f"<thead><tr>{headers}</tr></thead><tbody><tr>{cells}</tr></tbody></table></div>"
    )


def create_chart(chart_type: str = "bar", chart_id: str = "c1") -> str:
    chart_type = escape(chart_type)
    chart_id = escape(chart_id)
    return (
        f'<div class="card bg-base-100 shadow-sm p-4"><canvas id="{chart_id}"></canvas></div>\n'
        f"<script>new Chart(document.getElementById('{chart_id}'), "
        f"{{ type: '{chart_type}', data: {{ labels: ['A', 'B'], datasets: [{{ data: [10, 20] }}] }} }});</script>"
    )


SCRIPTS = {
    "modal": "document.getElementById('my_modal_1').showModal();",
    "drawer": (
        "document.getElementById('my-drawer').checked = "
        "!document.getElementById('my-drawer').checked;"
    ),
}


def get_script(component: str) -> str:
    return SCRIPTS.get(component.strip().lower(), "// No script")
