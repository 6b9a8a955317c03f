#experiments.py
import os
import time

from huffcodec.experiments import HuffmanExperiment
from huffcodec.patterns import generate_pattern_files


if __name__ == '__main__':
    experiments_output_path = 'experiments_out'
    patterns_path = os.path.join('experiments_data', 'patterns')

    input_paths = generate_pattern_files(patterns_path, 100000)

    for input_path in input_paths:
        pattern_name = os.path.splitext(os.path.basename(input_path))[0]
        experiment_name = f"experiment_{pattern_name}_{time.strftime('%Y%m%d_%H%M%S')}"
        experiment = HuffmanExperiment(experiment_name, input_path, experiments_output_path)
        experiment.run()
        experiment.save_report_in_text(os.path.join(experiments_output_path, experiment_name, f"{experiment_name}.txt"))
        experiment.display_graphs()
        print(f"{pattern_name}: ratio {experiment.compression_ratio:.3f}, integrity preserved: {experiment.integrity_preserved}")
