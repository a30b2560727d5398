"""Department statistics report rendering"""
from typing import Dict, List
from io import BytesIO
import pandas as pd
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


class ReportsService:
    """Renders department statistics as downloadable files"""

    def generate_csv(self, stats: List[Dict]) -> BytesIO:
        """One row per department and question; departments without ratings get a single row"""
        rows = []
        for entry in stats:
            base = {
                'Department': entry['department'],
                'Average Rating': round(entry['average_rating'], 2),
                'Total Feedbacks': entry['total_feedbacks'],
            }
            if not entry['question_stats']:
                rows.append({**base, 'Question ID': '', 'Question': '', 'Question Average': ''})
                continue
            for question in entry['question_stats']:
                rows.append({
                    **base,
                    'Question ID': question['question_id'],
                    'Question': question['question_text'],
                    'Question Average': round(question['average_rating'], 2),
                })
        df = pd.DataFrame(
            rows,
            columns=['Department', 'Average Rating', 'Total Feedbacks', 'Question ID', 'Question', 'Question Average'],
        )
        buffer = BytesIO()
        df.to_csv(buffer, index=False)
        buffer.seek(0)
        return buffer

    def generate_pdf(self, stats: List[Dict], title: str) -> BytesIO:
        """Generate PDF file from department statistics"""
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=letter)
        width, height = letter
        line_x1 = 50
        line_x2 = width - 50

        # Title
        c.setFont("Helvetica-Bold", 16)
        c.drawString(100, height - 50, title)

        y = height - 80
        c.setFont("Helvetica", 10)

        for entry in stats:
            # Keep the heading with at least its first question
            needed = 50 + 15 * min(len(entry['question_stats']), 1)
            if y - needed < 50:
                c.showPage()
                y = height - 50

            c.setFont("Helvetica-Bold", 11)
            c.drawString(50, y, entry['department'])
            c.setFont("Helvetica", 10)
            c.drawString(
                50, y - 15,
                f"Average: {entry['average_rating']:.2f}   Feedbacks: {entry['total_feedbacks']}",
            )
            y -= 30
            for question in entry['question_stats']:
                if y < 50:
                    c.showPage()
                    c.setFont("Helvetica", 10)
                    y = height - 50
                c.drawString(70, y, f"{question['question_text'][:80]}: {question['average_rating']:.2f}")
                y -= 15
            c.setLineWidth(0.5)
            c.line(line_x1, y - 5, line_x2, y - 5)
            y -= 20

        c.save()
        buffer.seek(0)
        return buffer
