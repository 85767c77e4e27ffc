"""Built-in kida templates.

Kept in Python so the package needs no data files; loaded through a
``DictLoader``.
"""

IMPLEMENTORS_TEMPLATE = "implview/implementors.html"
SUMMARY_TEMPLATE = "implview/summary.html"

_IMPLEMENTORS = """\
<h2 id="implementors" class="section-header">Implementors<a href="#implementors" class="anchor">§</a></h2>
<div id="implementors-list" data-trait="{{ trait }}" data-count="{{ concrete_count }}">
{% for row in rows %}
<section id="{{ row.anchor }}" class="impl" data-module="{{ row.module }}"><a href="#{{ row.anchor }}" class="anchor">§</a><h3 class="code-header">{{ row.markup | rebase_links(root_path) }}</h3></section>
{% end %}
</div>
{% if synthetic_rows %}
<h2 id="synthetic-implementors" class="section-header">Auto implementors<a href="#synthetic-implementors" class="anchor">§</a></h2>
<div id="synthetic-implementors-list" data-count="{{ synthetic_count }}">
{% for row in synthetic_rows %}
<section id="{{ row.anchor }}" class="impl" data-module="{{ row.module }}"><a href="#{{ row.anchor }}" class="anchor">§</a><h3 class="code-header">{{ row.markup | rebase_links(root_path) }}</h3></section>
{% end %}
</div>
{% end %}
"""

_SUMMARY = """\
<p class="implementors-summary">{{ count | pluralize("implementor") }} in {{ modules | pluralize("crate") }}</p>
"""

TEMPLATES: dict[str, str] = {
    IMPLEMENTORS_TEMPLATE: _IMPLEMENTORS,
    SUMMARY_TEMPLATE: _SUMMARY,
}
