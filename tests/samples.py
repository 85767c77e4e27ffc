"""Generator-shaped sample fragments shared by the tests."""

import json


BITXOR_REPR_FLAGS = """impl <a class="trait" href="https://doc.rust-lang.org/nightly/core/ops/bit/trait.BitXor.html" title="trait core::ops::bit::BitXor">BitXor</a>&lt;<a class="struct" href="rustc_abi/struct.ReprFlags.html" title="struct rustc_abi::ReprFlags">ReprFlags</a>&gt; for <a class="struct" href="rustc_abi/struct.ReprFlags.html" title="struct rustc_abi::ReprFlags">ReprFlags</a>"""

BITXOR_INLINE_ASM = """impl <a class="trait" href="https://doc.rust-lang.org/nightly/core/ops/bit/trait.BitXor.html" title="trait core::ops::bit::BitXor">BitXor</a>&lt;<a class="struct" href="rustc_ast/ast/struct.InlineAsmOptions.html" title="struct rustc_ast::ast::InlineAsmOptions">InlineAsmOptions</a>&gt; for <a class="struct" href="rustc_ast/ast/struct.InlineAsmOptions.html" title="struct rustc_ast::ast::InlineAsmOptions">InlineAsmOptions</a>"""

VISITOR_CFG_IF = """impl&lt;'a, 'ast: 'a&gt; <a class="trait" href="rustc_ast/visit/trait.Visitor.html" title="trait rustc_ast::visit::Visitor">Visitor</a>&lt;'ast&gt; for <a class="struct" href="rustfmt_nightly/modules/visitor/struct.CfgIfVisitor.html" title="struct rustfmt_nightly::modules::visitor::CfgIfVisitor">CfgIfVisitor</a>&lt;'a&gt;"""

VISITOR_IDENT_COLLECTOR = """impl <a class="trait" href="rustc_ast/visit/trait.Visitor.html" title="trait rustc_ast::visit::Visitor">Visitor</a>&lt;'_&gt; for <a class="struct" href="clippy_utils/ast_utils/ident_iter/struct.IdentCollector.html" title="struct clippy_utils::ast_utils::ident_iter::IdentCollector">IdentCollector</a>"""

VISITOR_EARLY_CONTEXT = """impl&lt;'a, T: <a class="trait" href="rustc_lint/passes/trait.EarlyLintPass.html" title="trait rustc_lint::passes::EarlyLintPass">EarlyLintPass</a>&gt; <a class="trait" href="rustc_ast/visit/trait.Visitor.html" title="trait rustc_ast::visit::Visitor">Visitor</a>&lt;'a&gt; for <a class="struct" href="rustc_lint/early/struct.EarlyContextAndPass.html" title="struct rustc_lint::early::EarlyContextAndPass">EarlyContextAndPass</a>&lt;'a, T&gt;"""

TYPE_FOLDER_BOUND_VAR_REPLACER = """impl&lt;'tcx, D&gt; <a class="trait" href="rustc_middle/ty/trait.TypeFolder.html" title="trait rustc_middle::ty::TypeFolder">TypeFolder</a>&lt;<a class="struct" href="rustc_middle/ty/context/struct.TyCtxt.html" title="struct rustc_middle::ty::context::TyCtxt">TyCtxt</a>&lt;'tcx&gt;&gt; for <a class="struct" href="rustc_middle/ty/fold/struct.BoundVarReplacer.html" title="struct rustc_middle::ty::fold::BoundVarReplacer">BoundVarReplacer</a>&lt;'tcx, D&gt;<span class="where fmt-newline">where
    D: <a class="trait" href="rustc_middle/ty/fold/trait.BoundVarReplacerDelegate.html" title="trait rustc_middle::ty::fold::BoundVarReplacerDelegate">BoundVarReplacerDelegate</a>&lt;'tcx&gt;,</span>"""

BITXOR_FRAGMENT = {
    "rustc_abi": [[BITXOR_REPR_FLAGS]],
    "rustc_ast": [[BITXOR_INLINE_ASM]],
}

VISITOR_FRAGMENT = {
    "clippy_utils": [[VISITOR_IDENT_COLLECTOR]],
    "rustfmt_nightly": [[VISITOR_CFG_IF]],
}


def wrap_fragment(mapping: dict) -> str:
    """Serialize ``mapping`` the way the documentation generator does."""
    lines = ",\n".join(f"{json.dumps(k)}:{json.dumps(v, separators=(',', ':'))}" for k, v in mapping.items())
    return (
        "(function() {var implementors = {\n"
        f"{lines}\n"
        "};if (window.register_implementors) {window.register_implementors(implementors);}"
        " else {window.pending_implementors = implementors;}})()"
    )

