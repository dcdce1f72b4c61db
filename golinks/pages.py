from html import escape

from golinks.schemas import Link, Stats

PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>Go Links Manager</title>
    <style>
        body {{ font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }}
        .form, .stats {{ background: #f5f5f5; padding: 1rem; border-radius: 5px; margin-bottom: 1rem; }}
        table {{ width: 100%; border-collapse: collapse; }}
        th, td {{ padding: 10px; text-align: left; border-bottom: 1px solid #ddd; }}
        .delete-btn {{ background: #dc3545; color: white; border: none; padding: 5px 10px; border-radius: 3px; }}
    </style>
</head>
<body>
    <h1>Go Links Manager</h1>
    <div class="form">
        <h2>Add New Link</h2>
        <form method="POST" action="/_/add">
            <input type="text" name="shortcut" placeholder="Shortcut (e.g., 'gh')" required>
            <input type="url" name="url" placeholder="URL (e.g., 'https://github.com')" required>
            <input type="text" name="description" placeholder="Description (optional)">
            <button type="submit">Add Link</button>
        </form>
    </div>
    <div class="stats">
        <h2>Statistics</h2>
        <p>Total Links: {total_links}</p>
        <p>Total Clicks: {total_clicks}</p>
        <p>Most Clicked: {most_clicked}</p>
    </div>
    <h2>Existing Links</h2>
    <table>
        <thead>
            <tr><th>Shortcut</th><th>URL</th><th>Description</th><th>Clicks</th><th>Created</th><th>Actions</th></tr>
        </thead>
        <tbody>
{rows}
        </tbody>
    </table>
</body>
</html>
"""

ROW = """            <tr>
                <td><a href="{base}/{shortcut}" target="_blank">{base}/{shortcut}</a></td>
                <td><a href="{url}" target="_blank">{url}</a></td>
                <td>{description}</td>
                <td>{clicks}</td>
                <td>{created}</td>
                <td>
                    <form method="POST" action="/_/delete" style="display: inline;">
                        <input type="hidden" name="shortcut" value="{shortcut}">
                        <button type="submit" class="delete-btn" onclick="return confirm('Are you sure?')">Delete</button>
                    </form>
                </td>
            </tr>"""

def render_row(link: Link, base: str) -> str:
    return ROW.format(
        base=escape(base),
        shortcut=escape(link.shortcut),
        url=escape(link.url),
        description=escape(link.description or "-"),
        clicks=link.click_count,
        created=link.created_at.date().isoformat(),
    )

def render_index(links: list[Link], stats: Stats, base: str) -> str:
    most = stats.most_clicked
    return PAGE.format(
        total_links=stats.total_links,
        total_clicks=stats.total_clicks,
        most_clicked=escape(f"{most.shortcut} ({most.click_count} clicks)") if most else "None",
        rows="\n".join(render_row(link, base) for link in links),
    )
