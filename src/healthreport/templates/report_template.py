"""Default HTML report template."""

REPORT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Healthcare Report - {{ reference_date }}</title>
    <style>
        :root {
            --primary: #2563eb; --success: #16a34a; --warning: #ca8a04;
            --gray-100: #f3f4f6; --gray-200: #e5e7eb; --gray-700: #374151; --gray-900: #111827;
        }
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6; color: var(--gray-900); max-width: 1200px; margin: 0 auto; padding: 2rem; background: var(--gray-100); }
        .header { background: white; padding: 2rem; border-radius: 8px; margin-bottom: 2rem; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
        h1 { color: var(--primary); margin: 0 0 0.5rem 0; }
        .meta { color: var(--gray-700); font-size: 0.9rem; }
        .stats { display: flex; gap: 2rem; margin-top: 1rem; }
        .stat { background: var(--gray-100); padding: 0.5rem 1rem; border-radius: 4px; }
        .stat-value { font-size: 1.5rem; font-weight: bold; color: var(--primary); }
        .stat-label { font-size: 0.75rem; color: var(--gray-700); }
        .section { background: white; padding: 1.5rem; border-radius: 8px; margin-bottom: 1.5rem; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
        .section h2 { margin: 0 0 1rem 0; display: flex; align-items: center; gap: 0.5rem; }
        .badge { display: inline-block; padding: 0.25rem 0.75rem; border-radius: 9999px; font-size: 0.75rem;
            font-weight: 600; background: #dbeafe; color: #1d4ed8; }
        .rows-table { width: 100%; border-collapse: collapse; font-size: 0.85rem; }
        .rows-table th { background: var(--gray-200); padding: 0.5rem; text-align: left; border-bottom: 1px solid var(--gray-700); }
        .rows-table td { padding: 0.5rem; border-bottom: 1px solid var(--gray-200); }
        .empty { color: var(--success); padding: 0.5rem; background: #f0fdf4; border-radius: 4px; }
    </style>
</head>
<body>
    <div class="header">
        <h1>Healthcare Report</h1>
        <p class="meta">Store: {{ database }} &middot; Reference date: {{ reference_date }} &middot; Generated: {{ generated_at }}</p>
        <div class="stats">
            <div class="stat"><div class="stat-value">{{ sections | length }}</div><div class="stat-label">Queries</div></div>
            <div class="stat"><div class="stat-value">{{ total_rows }}</div><div class="stat-label">Rows</div></div>
            <div class="stat"><div class="stat-value">{{ processing_time }}</div><div class="stat-label">Query Time</div></div>
        </div>
    </div>
    {% for section in sections %}
    <div class="section" id="{{ section.name }}">
        <h2>{{ section.title }}<span class="badge">{{ section.rows | length }} rows</span></h2>
        {% if section.rows %}
        <table class="rows-table">
            <thead><tr>{% for col in section.columns %}<th>{{ col | replace('_', ' ') }}</th>{% endfor %}</tr></thead>
            <tbody>
            {% for row in section.rows %}
                <tr>{% for col in section.columns %}<td>{{ row[col] if row[col] is not none else '' }}</td>{% endfor %}</tr>
            {% endfor %}
            </tbody>
        </table>
        {% else %}
        <div class="empty">No rows</div>
        {% endif %}
    </div>
    {% endfor %}
</body>
</html>"""
