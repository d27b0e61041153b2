# models/normalization_report.py

class NormalizationReport:
    """Class to track how model output was turned into quiz items"""

    def __init__(self):
        self.parse_stage = None
        self.candidate_count = 0
        self.kept_count = 0
        self.returned_count = 0
        self.dropped = []
        self.warnings = []

    def set_parse_stage(self, stage):
        """Record which parse stage produced the JSON value"""
        self.parse_stage = stage

    def set_candidate_count(self, count):
        self.candidate_count = count

    def add_dropped(self, index, reason):
        """Record a candidate that failed the shape check"""
        self.dropped.append({
            'index': index,
            'reason': reason
        })

    def add_warning(self, warning_message):
        self.warnings.append(warning_message)

    def set_kept_count(self, count):
        self.kept_count = count

    def set_returned_count(self, count):
        """Set the number of items after the max-quizzes cut"""
        self.returned_count = count

    @property
    def dropped_count(self):
        return len(self.dropped)

    def generate_report(self):
        """Generate a readable normalization report"""
        report = "\n" + "=" * 60 + "\n"
        report += "MODEL OUTPUT NORMALIZATION REPORT\n"
        report += "=" * 60 + "\n"

        report += f"Parse stage: {self.parse_stage or 'failed'}\n"
        report += f"Candidates: {self.candidate_count}\n"
        report += f"Kept after shape check: {self.kept_count}\n"
        report += f"Returned: {self.returned_count}\n"

        if self.dropped:
            report += "\nDROPPED CANDIDATES:\n"
            report += "-" * 20 + "\n"
            for item in self.dropped:
                report += f"• #{item['index']}: {item['reason']}\n"

        if self.warnings:
            report += "\nWARNINGS:\n"
            report += "-" * 15 + "\n"
            for warning in self.warnings:
                report += f"⚠️  {warning}\n"

        report += "=" * 60 + "\n"
        return report
