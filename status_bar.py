import os


def render_status(context, width):
    """
    context keys: message, file_path, target_row, target_column, column_name,
                  column_count, first_row, last_row, reached_end
    """
    if context.get('message'):
        text = f" {context['message']}"
    else:
        fname = context.get('file_path') or ''
        if fname:
            fname = os.path.basename(fname)
        row = context.get('target_row', 0)
        col = context.get('target_column', 0)
        col_count = context.get('column_count', 0)
        col_name = context.get('column_name') or ''
        first = context.get('first_row', 0)
        last = context.get('last_row', -1)
        if last < first:
            window_info = f"window empty at {first + 1}"
        else:
            window_info = f"window {first + 1}-{last + 1}"
        col_info = f"col {col + 1}/{col_count}"
        if col_name:
            col_info += f" {col_name}"
        text = f" {fname} | row {row + 1} | {col_info} | {window_info}"
        if context.get('reached_end'):
            text += " | END"

    return text.ljust(width)[:width]
