from datetime import date
import io
import matplotlib
from matplotlib.figure import Figure

# keep text as <text> elements instead of glyph paths
matplotlib.rcParams["svg.fonttype"] = "none"


def build_status(repository) -> dict:
    return {
        "total_countries": repository.count_all(),
        "last_refreshed_at": repository.max_last_refreshed_at(),
    }


def render_summary_image(total_countries: int, top_countries, rendered_on: date | None = None) -> bytes:
    """SVG summary: total count, render date and the top countries by estimated GDP."""
    rendered_on = rendered_on or date.today()
    top_names = [c.name for c in top_countries]
    top_gdps = [c.estimated_gdp for c in top_countries]

    # no pyplot: its global figure manager is shared across request threads
    fig = Figure(figsize=(8, 5), facecolor="#1a1a2e")
    fig.suptitle("Country Currency API", color="white", fontsize=18)
    fig.text(0.5, 0.86, f"Total Countries: {total_countries}", ha="center", color="white", fontsize=14)
    fig.text(0.5, 0.03, f"Generated {rendered_on.isoformat()}", ha="center", color="white", fontsize=10)

    if top_names:
        ax = fig.add_axes([0.12, 0.15, 0.8, 0.62])
        ax.bar(top_names, top_gdps, color="skyblue")
        ax.set_title("Top 5 Countries by Estimated GDP", color="white")
        ax.set_ylabel("Estimated GDP", color="white")
        ax.tick_params(colors="white")

    buffer = io.BytesIO()
    fig.savefig(buffer, format="svg", facecolor=fig.get_facecolor())
    return buffer.getvalue()
