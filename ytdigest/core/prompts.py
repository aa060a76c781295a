summary_template = """
    Summarize the following YouTube video transcript into a concise and engaging summary.
    Use markdown. Start with a short overview paragraph, then list the key takeaways
    as bullet points (at most {num_sentences}). When the transcript mentions a moment
    in the video, keep its timestamp in m:ss form.

    Transcript:
    {text}
    """

map_template = """
    Summarize this part of a YouTube video transcript. Keep concrete facts, names,
    numbers and any timestamps.

    {text}
    """

reduce_template = """
    Combine these partial summaries of one YouTube video into a single concise and
    engaging summary. Use markdown. Start with a short overview paragraph, then list
    the key takeaways as bullet points (at most {num_sentences}).

    {summaries}
    """
