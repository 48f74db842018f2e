"""
Static CSS and JavaScript embedded in rendered views.

These are opaque templates: renderers only paste them in (substituting the
table id into the sort script).
"""

STYLE = """<style>
.todo-container { font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif; font-size: 14px; }
.todo-card { border: 1px solid #d0d7de; border-left: 4px solid #8c959f; border-radius: 6px; padding: 6px 10px; margin: 4px 0; background: #fff; }
.todo-card.todo-done { opacity: 0.55; }
.todo-card.todo-done .todo-desc { text-decoration: line-through; }
.todo-card.todo-priority-a { border-left-color: #cf222e; }
.todo-card.todo-priority-b { border-left-color: #bf8700; }
.todo-card.todo-priority-c { border-left-color: #1a7f37; }
.todo-check { margin-right: 6px; }
.todo-priority { display: inline-block; font-weight: bold; margin-right: 6px; color: #57606a; }
.todo-pill { display: inline-block; border-radius: 10px; padding: 0 7px; margin: 0 2px; font-size: 12px; }
.todo-pill-context { background: #ddf4ff; color: #0969da; }
.todo-pill-project { background: #fbefff; color: #8250df; }
.todo-pill-meta { background: #f6f8fa; color: #57606a; }
.todo-dates { font-size: 12px; color: #57606a; margin-left: 6px; }
.todo-table { border-collapse: collapse; width: 100%; }
.todo-table th { cursor: pointer; text-align: left; border-bottom: 2px solid #d0d7de; padding: 4px 8px; user-select: none; }
.todo-table td { border-bottom: 1px solid #eaeef2; padding: 4px 8px; }
.todo-sort-arrow { font-size: 10px; color: #57606a; }
.todo-kanban { display: flex; gap: 10px; align-items: flex-start; overflow-x: auto; }
.todo-kanban-col { flex: 0 0 240px; background: #f6f8fa; border-radius: 6px; padding: 6px; }
.todo-kanban-header { font-weight: bold; padding: 4px; }
.todo-kanban-count { color: #57606a; font-weight: normal; }
.todo-gantt, .todo-due { width: 100%; }
.todo-gantt-axis, .todo-due-axis { display: flex; justify-content: space-between; font-size: 12px; color: #57606a; margin-left: 30%; }
.todo-gantt-row, .todo-due-row { display: flex; align-items: center; margin: 3px 0; }
.todo-gantt-label, .todo-due-label { flex: 0 0 30%; overflow: hidden; text-overflow: ellipsis; white-space: nowrap; padding-right: 8px; }
.todo-gantt-track, .todo-due-track { position: relative; flex: 1; height: 16px; background: #f6f8fa; border-radius: 3px; }
.todo-gantt-bar { position: absolute; top: 2px; height: 12px; border-radius: 3px; background: #8c959f; }
.todo-gantt-bar-a { background: #cf222e; }
.todo-gantt-bar-b { background: #bf8700; }
.todo-gantt-bar-c { background: #1a7f37; }
.todo-gantt-bar-other { background: #0969da; }
.todo-gantt-bar-done { opacity: 0.4; }
.todo-due-marker { position: absolute; top: 2px; width: 12px; height: 12px; margin-left: -6px; border-radius: 50%; }
.todo-due-today { position: absolute; top: 0; bottom: 0; width: 2px; background: #24292f; }
.todo-due-status { flex: 0 0 110px; font-size: 12px; padding-left: 8px; }
.todo-due-overdue { background: #cf222e; }
.todo-due-urgent { background: #fb8500; }
.todo-due-soon { background: #bf8700; }
.todo-due-ok { background: #1a7f37; }
.todo-due-plenty { background: #0969da; }
.todo-empty { color: #57606a; font-style: italic; padding: 8px; }
</style>"""

# __TABLE_ID__ is replaced with the table's element id.
SORT_SCRIPT = """<script>
(function () {
  var state = { col: -1, asc: true };
  window.todoSort___TABLE_ID__ = function (col) {
    var table = document.getElementById("todo-table-__TABLE_ID__");
    var body = table.tBodies[0];
    var rows = Array.prototype.slice.call(body.rows);
    if (state.col === col) {
      state.asc = !state.asc;
    } else {
      state.col = col;
      state.asc = true;
    }
    rows.sort(function (a, b) {
      var x = a.cells[col].getAttribute("data-sort-value");
      var y = b.cells[col].getAttribute("data-sort-value");
      var c = x < y ? -1 : (x > y ? 1 : 0);
      return state.asc ? c : -c;
    });
    rows.forEach(function (r) { body.appendChild(r); });
    var arrows = table.querySelectorAll(".todo-sort-arrow");
    for (var i = 0; i < arrows.length; i++) {
      arrows[i].textContent = i === col ? (state.asc ? "▲" : "▼") : "";
    }
  };
})();
</script>"""


def sort_script(table_id: str) -> str:
    return SORT_SCRIPT.replace("__TABLE_ID__", table_id)
